from unittest.mock import MagicMock

FUNCTION_URL = "https://agent-func.example.net"
FUNCTION_KEY = "s3cret-key"


def fake_response(payload, status_code=200):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    return resp
