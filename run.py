import os

from gym_management import create_app

app = create_app(os.getenv("FLASK_CONFIG", "development"))

if __name__ == '__main__':
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "3000")), debug=app.config.get("DEBUG", False))
