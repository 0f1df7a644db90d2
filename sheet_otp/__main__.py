import logging

from sheet_otp import create_app
from sheet_otp.config import Config


def main():
    config = Config.from_env()
    app = create_app(config)
    logging.getLogger("sheet_otp").info(f"Server running on port {config.port}")
    app.run(host=config.host, port=config.port)


if __name__ == '__main__':
    main()
