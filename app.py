from dotenv import load_dotenv

from src.staff_movement.staff_movement.main import create_app

load_dotenv(override=False)

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=bool(app.config.get("DEBUG")), use_reloader=False)
