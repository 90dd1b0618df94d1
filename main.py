import logging

from tracerfire.app import App
from tracerfire.config import LOG_FORMAT, LOG_LEVEL


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    App().run()


if __name__ == "__main__":
    main()
