import uvicorn

from smart_ping.core.config import settings

def main():
    uvicorn.run("smart_ping.main:app", host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    main()
