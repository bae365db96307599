import logging

from staticserve.app import PUBLIC_DIR, app

# --- Configuration ---
PORT = 8080
HOST = "0.0.0.0"  # Listen on every interface
# -------------------


def main():
    # Only the banner is printed; keep Werkzeug's per-request access log quiet
    logging.getLogger("werkzeug").setLevel(logging.ERROR)

    print(f"✓ Server running on http://localhost:{PORT}")
    print(f"✓ Serving files from: {PUBLIC_DIR}")

    # A port that can't be bound raises OSError here and ends the process
    app.run(host=HOST, port=PORT, threaded=True, use_reloader=False)


if __name__ == "__main__":
    main()
