import os

from dotenv import load_dotenv

load_dotenv()

from account_relay import create_app  # noqa: E402

app = create_app()

if __name__ == "__main__":
    port = int(os.getenv("PORT", "3000"))
    print(f"🚀 Starting account relay on http://0.0.0.0:{port}")
    if not app.config.get("PAYSTACK_SECRET_KEY"):
        print("Make sure to set PAYSTACK_SECRET_KEY in your .env file")
    app.run(host="0.0.0.0", port=port, debug=app.config.get("DEBUG", False))
