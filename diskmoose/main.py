import asyncio
import logging
import signal

from . import __version__
from .core.exceptions import MonitorAbortedError
from .dependencies import get_disk_monitor, get_settings
from .logging_config import setup_logging

EXIT_OK = 0
EXIT_ABORTED = 1


async def main() -> int:
    """Run the disk monitor until it is stopped by a signal or aborts."""
    settings = get_settings()
    setup_logging(settings)

    config_info = settings.config_file_info
    logging.info(f"diskmoose {__version__} starting up on {config_info['hostname']}")
    logging.info(f"Configuration loaded from: {config_info['active_config_file']}")
    logging.info(f"Monitored mount points: {', '.join(settings.relevant_mount_points)}")

    disk_monitor = get_disk_monitor()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, disk_monitor.stop_monitoring)

    try:
        await disk_monitor.start_monitoring()
    except MonitorAbortedError as e:
        logging.critical(f"Disk monitoring aborted: {e}")
        return EXIT_ABORTED
    finally:
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.remove_signal_handler(sig)

    logging.info("diskmoose shutting down")
    return EXIT_OK


def run() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    run()
