import argparse
import random

from flask import Flask, jsonify, request

from logger import write_log
from password_generator import POLICIES, generate_many, keyspace_size
from strength import InvalidLevelError, classify, parse_level, suggestions

# =========================================
# GLOBAL CONFIGURATION
# =========================================

DEFAULT_PORT = 5000
MAX_COUNT = 100

app = Flask(__name__)


def fail(reason, code=400):
    return jsonify({"status": "fail", "reason": reason}), code


# =========================================
# ROUTES
# =========================================

@app.route("/classify", methods=["POST"])
def classify_route():
    data = request.get_json(silent=True) or {}
    password = data.get("password")
    if not isinstance(password, str):
        return fail("password must be a string")

    level = classify(password)
    write_log("classify", level, len(password), "server")
    return jsonify({
        "status": "success",
        "level": level.value,
        "length": len(password),
        "suggestions": suggestions(password),
    }), 200


@app.route("/generate", methods=["GET"])
def generate_route():
    try:
        level = parse_level(request.args.get("level", ""))
    except InvalidLevelError as e:
        return fail(str(e))

    try:
        count = int(request.args.get("count", 1))
    except ValueError:
        return fail("count must be an integer")
    if count < 1 or count > MAX_COUNT:
        return fail(f"count must be between 1 and {MAX_COUNT}")

    # fresh random source per request
    passwords = generate_many(level, count, random.Random())
    for pwd in passwords:
        write_log("generate", level, len(pwd), "server")

    return jsonify({"status": "success", "level": level.value, "passwords": passwords}), 200


@app.route("/levels", methods=["GET"])
def levels_route():
    return jsonify({
        level.value: {
            "min_length": policy.min_length,
            "max_length": policy.max_length,
            "charset": policy.charset,
            "keyspace": str(keyspace_size(level)),
        }
        for level, policy in POLICIES.items()
    }), 200


# =========================================
# MAIN
# =========================================

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Password strength HTTP service.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args()

    print(f"[*] Server on {args.host}:{args.port}. Levels: {[level.value for level in POLICIES]}")
    app.run(host=args.host, port=args.port, debug=False)
