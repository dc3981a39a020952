import uvicorn
from fridge.api.api_run import app
from fridge.utilities.config import APP_HOST, APP_PORT


if __name__ == "__main__":
    print(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
