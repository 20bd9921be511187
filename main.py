import os
import json
import logging
from flask import Flask, request, jsonify
from flask_cors import CORS
import requests

# ----------------------
# Configuration
# ----------------------
FRONTEND_ORIGIN = os.getenv("FRONTEND_ORIGIN", "http://localhost:3000")
PORT = int(os.getenv("PORT", "8080"))

DEFAULT_POST_ENDPOINT = "agent"
DEFAULT_GET_ENDPOINT = "health"

# Logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("agent-proxy")

# ----------------------
# App Setup
# ----------------------
app = Flask(__name__)
# Relay backend objects with their original key order
app.json.sort_keys = False
CORS(app, origins=[FRONTEND_ORIGIN])

# ----------------------
# Helpers
# ----------------------
def get_function_config(env_prefix: str):
    """Read <PREFIX>_URL and <PREFIX>_KEY; empty values count as missing."""
    url = os.getenv(f"{env_prefix}_URL") or None
    key = os.getenv(f"{env_prefix}_KEY") or None
    return url, key

def get_timeout():
    raw = os.getenv("FUNCTION_TIMEOUT")
    return float(raw) if raw else None

def build_function_url(base_url: str, endpoint: str) -> str:
    return f"{base_url}/api/{endpoint}"

def forward_to_function(env_prefix: str, label: str):
    """Relay the current request to the function backend named by env_prefix.

    POST forwards the JSON body and defaults to the "agent" endpoint, GET
    sends no body and defaults to "health". The backend's JSON body and
    status code are returned unchanged.
    """
    try:
        base_url, key = get_function_config(env_prefix)
        if not base_url or not key:
            logger.error("%s_URL or %s_KEY is not configured", env_prefix, env_prefix)
            return jsonify({"error": f"Missing {label} configuration"}), 500

        if request.method == "POST":
            body = request.get_json(force=True)
            endpoint = request.args.get("endpoint") or DEFAULT_POST_ENDPOINT
            resp = requests.request(
                "POST",
                build_function_url(base_url, endpoint),
                params={"code": key},
                headers={"Content-Type": "application/json"},
                data=json.dumps(body),
                timeout=get_timeout(),
            )
        else:
            endpoint = request.args.get("endpoint") or DEFAULT_GET_ENDPOINT
            resp = requests.request(
                "GET",
                build_function_url(base_url, endpoint),
                params={"code": key},
                timeout=get_timeout(),
            )

        return jsonify(resp.json()), resp.status_code
    except Exception as e:
        logger.exception("Agent proxy error: %s", e)
        return jsonify({"error": "Failed to call agent"}), 500

# ----------------------
# Endpoints
# ----------------------
@app.route("/", methods=["GET"])
def health_check():
    return jsonify({"status": "proxy-running"}), 200

@app.route("/api/agent", methods=["GET", "POST"])
def agent_proxy():
    return forward_to_function("AGENT_FUNCTION", "agent function")

@app.route("/api/azure-function", methods=["GET", "POST"])
def azure_function_proxy():
    return forward_to_function("AZURE_FUNCTION", "Azure function")


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=PORT)
