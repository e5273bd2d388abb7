"""
Instant Upload Service

Command-line front-end for the instant upload scheduler.
Wires configuration, accounts, the pending store, the network probe and the
uploader together, then feeds one event into the scheduler.

Commands:
    capture {picture,video} PATH [--network wifi|mobile|none]
        A new picture or video was taken. Without --network the current
        network state is probed.

    connectivity [--wifi] [--offline]
        Network conditions changed: drain pending uploads when allowed.

    pending
        List queued uploads.

Uploads go to a local mirror folder (UPLOAD_MIRROR_DIR or --mirror-dir).
capture and connectivity refuse to run without one, leaving pending uploads
queued; pending works without it.
"""

import argparse
import logging
import logging.handlers
import shutil
import sys
from pathlib import Path
from typing import List, Optional

from accounts import ConfiguredAccountRegistry, create_account_resolver
from config.settings import (
    LOG_BACKUP_COUNT,
    LOG_DIR,
    LOG_FALLBACK_DIR,
    LOG_SERVICE_FILE,
    UPLOAD_MIRROR_DIR,
    UPLOAD_WAIT_TIMEOUT,
)
from content import FileSystemContentResolver
from core.constants import MediaKind
from core.network import NetworkStateInterface, StaticNetworkState, SystemNetworkState
from scheduling import (
    ConfigError,
    ConnectivityEvent,
    InstantUploadConfig,
    InstantUploadScheduler,
    MediaCaptureEvent,
)
from storage import StorageError, create_pending_store
from storage.interfaces.pending_store_interface import PendingUploadStoreInterface
from storage.utils.path_utils import ensure_directory
from upload import QueuedUploader, RemoteNamingPolicy, UploadJobBuilder, create_uploader
from upload.implementations.queued_uploader import TransferFunction
from upload.interfaces.uploader_interface import UploaderInterface, UploadJob

# Commands that hand jobs to the uploader
TRANSFER_COMMANDS = ("capture", "connectivity")

# --network values → (has_connectivity, is_wifi)
NETWORK_CHOICES = {
    "wifi": (True, True),
    "mobile": (True, False),
    "none": (False, False),
}


def make_mirror_transfer(mirror_dir: Path) -> TransferFunction:
    """
    Transfer that copies files into a local folder per account.

    Args:
        mirror_dir: Root of the mirror

    Returns:
        Transfer callable for QueuedUploader
    """
    logger = logging.getLogger(__name__)

    def transfer(job: UploadJob) -> bool:
        target = mirror_dir / job.account_name / job.remote_file_path.lstrip("/")
        if not ensure_directory(target.parent):
            return False
        shutil.copy2(job.local_file_path, target)
        logger.debug(f"Copied {job.local_file_path} to {target}")
        return True

    return transfer


class InstantUploadService:
    """
    Owns the scheduler and its collaborators for one process.

    Usage:
        service = InstantUploadService(InstantUploadConfig())
        service.scheduler.on_media_captured(event)
        service.shutdown()
    """

    def __init__(
        self,
        config: InstantUploadConfig,
        network_state: Optional[NetworkStateInterface] = None,
        mirror_dir: Optional[Path] = None,
    ):
        """
        Build every collaborator from configuration.

        Args:
            config: Loaded instant upload configuration
            network_state: Network source (None = probe the system)
            mirror_dir: Local mirror for uploads (None = mock uploader, listing only)

        Raises:
            StorageError: If the pending store cannot be opened
        """
        self.logger = logging.getLogger(__name__)
        self.config = config

        registry = ConfiguredAccountRegistry(config.accounts, config.current_account)
        resolver = create_account_resolver(
            config.account_strategy,
            registry,
            config.allowed_accounts,
        )

        self.store: PendingUploadStoreInterface = create_pending_store(
            db_path=config.pending_db_path,
        )

        transfer = make_mirror_transfer(mirror_dir) if mirror_dir else None
        self.uploader: UploaderInterface = create_uploader(
            transfer=transfer,
            move_dir=config.local_move_dir,
        )

        naming = RemoteNamingPolicy(
            picture_folder=config.picture_upload_path,
            video_folder=config.video_upload_path,
        )

        self.scheduler = InstantUploadScheduler(
            config=config.policy,
            account_resolver=resolver,
            pending_store=self.store,
            content_resolver=FileSystemContentResolver(),
            network_state=network_state or SystemNetworkState(),
            uploader=self.uploader,
            job_builder=UploadJobBuilder(naming),
        )

    def shutdown(self) -> None:
        """Wait for queued transfers, then release resources"""
        if isinstance(self.uploader, QueuedUploader):
            if not self.uploader.wait_until_idle(timeout=UPLOAD_WAIT_TIMEOUT):
                self.logger.warning(
                    f"{self.uploader.pending_count()} upload(s) still queued at shutdown"
                )
            self.uploader.stop()

        self.store.cleanup()
        self.logger.info("Instant upload service stopped")


def setup_logging(level: int = logging.INFO) -> None:
    """
    Setup logging with rotation.

    Logs to both console and file:
    - Daily rotation
    - Keep LOG_BACKUP_COUNT days of logs
    - Falls back to ./logs when LOG_DIR is not writable
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s | %(name)s"))
    logger.addHandler(console_handler)

    file_format = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s | %(name)s",
    )

    log_file = Path(LOG_DIR) / LOG_SERVICE_FILE
    try:
        file_handler = logging.handlers.TimedRotatingFileHandler(
            str(log_file),
            when="midnight",
            interval=1,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except (PermissionError, FileNotFoundError):
        # Fallback to local logs directory if LOG_DIR is not writable
        logs_dir = Path(LOG_FALLBACK_DIR)
        logs_dir.mkdir(exist_ok=True)

        fallback_log = logs_dir / "instant-upload-service.log"
        logger.warning(f"Cannot write to {log_file}, using fallback: {fallback_log}")
        logger.info(
            f"To fix: sudo mkdir -p {LOG_DIR} && sudo chown $(whoami) {LOG_DIR}",
        )

        file_handler = logging.handlers.TimedRotatingFileHandler(
            str(fallback_log),
            when="midnight",
            interval=1,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )

    file_handler.setLevel(level)
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    """Command-line parser"""
    parser = argparse.ArgumentParser(
        prog="instant_upload_service",
        description="Upload pictures and videos as soon as they are taken",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML configuration file (default: INSTANT_UPLOAD_CONFIG_PATH)",
    )
    parser.add_argument(
        "--mirror-dir",
        type=Path,
        default=UPLOAD_MIRROR_DIR,
        help="Copy uploads into this folder (required by capture and connectivity)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    capture = commands.add_parser("capture", help="Handle a new picture or video")
    capture.add_argument("kind", choices=[kind.value for kind in MediaKind])
    capture.add_argument("path", help="Local path or file:// URI of the capture")
    capture.add_argument(
        "--network",
        choices=sorted(NETWORK_CHOICES),
        default=None,
        help="Override the probed network state",
    )

    connectivity = commands.add_parser(
        "connectivity",
        help="Drain pending uploads after a network change",
    )
    connectivity.add_argument("--wifi", action="store_true", help="Connected via Wi-Fi")
    connectivity.add_argument("--offline", action="store_true", help="No connection")

    commands.add_parser("pending", help="List queued uploads")

    return parser


def run_command(args: argparse.Namespace) -> int:
    """
    Execute one parsed command.

    Returns:
        Process exit code
    """
    logger = logging.getLogger(__name__)

    if args.command in TRANSFER_COMMANDS and args.mirror_dir is None:
        logger.error(
            f"No upload transport configured, refusing to run '{args.command}'. "
            f"Set UPLOAD_MIRROR_DIR or pass --mirror-dir"
        )
        return 3

    try:
        config = InstantUploadConfig(args.config)
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    network_state: Optional[NetworkStateInterface] = None
    if getattr(args, "network", None):
        has_connectivity, is_wifi = NETWORK_CHOICES[args.network]
        network_state = StaticNetworkState()
        network_state.set(has_connectivity, is_wifi=is_wifi)

    try:
        service = InstantUploadService(config, network_state, args.mirror_dir)
    except StorageError as e:
        logger.error(f"Cannot open pending upload store: {e}")
        return 1

    try:
        if args.command == "capture":
            event = MediaCaptureEvent(MediaKind(args.kind), args.path)
            result = service.scheduler.on_media_captured(event)
            print(
                f"{result.outcome.value}: dispatched={result.dispatched} "
                f"deferred={result.deferred} failed={result.failed}"
            )

        elif args.command == "connectivity":
            event = ConnectivityEvent(
                has_connectivity=not args.offline,
                is_wifi=args.wifi,
            )
            drain = service.scheduler.on_connectivity_changed(event)
            if drain.ran:
                print(
                    f"drained: dispatched={drain.dispatched} "
                    f"stale={drain.stale_removed} kept={drain.kept} "
                    f"failed={drain.failed}"
                )
            else:
                print(f"skipped: {drain.skipped_reason}")

        elif args.command == "pending":
            records = service.store.list_all()
            for line in format_pending(records):
                print(line)

    except StorageError as e:
        logger.error(f"Pending upload store error: {e}")
        return 1
    finally:
        service.shutdown()

    return 0


def format_pending(records) -> List[str]:
    """One line per queued record, or a placeholder when empty"""
    if not records:
        return ["No pending uploads"]
    return [
        f"{record.id:>5}  {record.kind.value:<7}  {record.account_name:<24}  "
        f"{record.file_path}"
        for record in records
    ]


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Sets up logging and runs one command.
    """
    args = build_parser().parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    logger = logging.getLogger(__name__)
    logger.info(f"Instant upload service: {args.command}")

    try:
        return run_command(args)
    except Exception as e:
        logger.critical(f"Fatal error in main: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
