"""Run the Harmonic API server.

Usage:
    python -m harmonic
"""
import logging

import uvicorn

from harmonic.core import config
from harmonic.main import create_app


def main() -> None:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app = create_app()
    logging.getLogger('harmonic').info('Harmonic server is running on port %s', config.PORT)
    uvicorn.run(app, host='0.0.0.0', port=config.PORT)


if __name__ == '__main__':
    main()
