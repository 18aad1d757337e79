# sampleshop/main.py
import uvicorn

from sampleshop.api import create_app
from sampleshop.utils.settings import APP_HOST, APP_PORT

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
