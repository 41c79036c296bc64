"""
Test fixtures for the RozetkaPay client.

Contains:
- http.py: ScriptedAPI (httpx.MockTransport handler) and json_response()
- payment_response.json: payment info body mixing every tolerated wire format
- payparts_banks.json: bank list with string-encoded limits and fees
"""
