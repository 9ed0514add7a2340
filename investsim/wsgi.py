#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app investsim.wsgi run --port 5000 --debug

import logging

from investsim.app import create_app
from investsim.config import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = create_app(settings)


if __name__ == "__main__":
    app.run(port=settings.API_PORT, debug=settings.DEBUG)
