import uvicorn

from strategy_advisor.app import create_app
from strategy_advisor.config import HOST, PORT

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
