"""`python -m orrery3d` - open the window and run the solar system."""

from orrery3d.engine import Engine
from orrery3d.utils import logger


def main() -> None:
    Engine().run()


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:
        logger.error(f"[orrery3d] Fatal error: {exc}")
        raise
