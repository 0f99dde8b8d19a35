from pathlib import Path

from dotenv import load_dotenv
import uvicorn

from text_splitter.app import create_app

ROOT = Path(__file__).resolve().parents[1]
load_dotenv(ROOT / ".env")

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
