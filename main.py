"""Local development server for the lottery API.

Also the entrypoint Vercel's Flask detection picks up (it looks for ``app``).
"""

from loterias import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8000, debug=app.config.get("DEBUG", False))
