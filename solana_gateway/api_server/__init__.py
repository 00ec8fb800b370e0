"""
API server package — HTTP/REST interface.

One router per endpoint group (info, keypair, token, message, transfer);
each validates with core.validators and delegates to the chain adapters.
"""
