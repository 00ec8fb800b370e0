from locust import HttpUser, task, between
from solders.keypair import Keypair

# Fixed pool of real keys so instruction endpoints get valid input
keys = [str(Keypair().pubkey()) for _ in range(10)]


class GatewayUser(HttpUser):
    wait_time = between(1, 2)

    def on_start(self):
        # own keypair per simulated user for sign/verify
        resp = self.client.post("/keypair")
        self.keypair = resp.json()["data"]

    @task(3)
    def sign_and_verify(self):
        message = "load test"
        signed = self.client.post(
            "/message/sign",
            json={"message": message, "secret": self.keypair["secretKey"]},
        ).json()
        self.client.post(
            "/message/verify",
            json={
                "message": message,
                "signature": signed["data"]["signature"],
                "pubkey": self.keypair["publicKey"],
            },
        )

    @task(2)
    def send_sol(self):
        self.client.post("/send/sol", json={"from": keys[0], "to": keys[1], "lamports": 1000})

    @task(2)
    def send_token(self):
        self.client.post(
            "/send/token",
            json={"destination": keys[2], "mint": keys[3], "owner": keys[4], "amount": 10},
        )

    @task
    def health(self):
        self.client.get("/health")
