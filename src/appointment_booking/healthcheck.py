"""Container health probe: exit 0 when /health answers 200, 1 otherwise."""
import os
import sys

import requests


def check(host="localhost", port=None, timeout=2):
    port = port or int(os.getenv("PORT", "3000"))
    try:
        response = requests.get(f"http://{host}:{port}/health", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def main():
    sys.exit(0 if check() else 1)


if __name__ == "__main__":
    main()
