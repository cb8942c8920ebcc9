"""Run the ILP REST service with uvicorn."""
import uvicorn

from ilp_rest.core.config import settings


def main() -> None:
    uvicorn.run("ilp_rest.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
