"""
Upload Factory

Factory pattern for creating uploader implementations.
Follows same pattern as storage/factory.py for consistency.
"""

import logging
from pathlib import Path
from typing import Literal, Optional

from upload.implementations.mock_uploader import MockUploader
from upload.implementations.queued_uploader import QueuedUploader, TransferFunction
from upload.interfaces.uploader_interface import UploaderInterface

# Type alias
UploaderMode = Literal["auto", "queued", "mock"]


class UploaderFactory:
    """
    Factory for creating uploader implementations.

    A queued uploader needs a transfer callable (the transport). Without
    one, "auto" falls back to the mock uploader.

    Usage:
        # Real transfers through a transport
        uploader = UploaderFactory.create_uploader(transfer=webdav_put)

        # Force mock for testing
        uploader = UploaderFactory.create_uploader(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_uploader(
        cls,
        mode: UploaderMode = "auto",
        transfer: Optional[TransferFunction] = None,
        move_dir: Optional[Path] = None,
    ) -> UploaderInterface:
        """
        Create an uploader instance.

        Args:
            mode: "auto" (queued if a transport is given), "queued" (force),
                "mock" (force simulation)
            transfer: Transfer callable for the queued uploader
            move_dir: Local folder for files uploaded with MOVE behaviour

        Returns:
            UploaderInterface implementation; a queued uploader is already
            started

        Raises:
            RuntimeError: If mode="queued" but no transfer is given
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Uploader (forced)")
            return MockUploader()

        if transfer is None:
            if mode == "queued":
                raise RuntimeError("Queued uploader requested but no transfer given")
            cls._logger.warning("No upload transport configured, using Mock Uploader")
            return MockUploader()

        cls._logger.info("Creating Queued Uploader")
        uploader = QueuedUploader(transfer=transfer, move_dir=move_dir)
        uploader.start()
        return uploader


# Convenience function for quick creation
def create_uploader(
    force_mock: bool = False,
    transfer: Optional[TransferFunction] = None,
    move_dir: Optional[Path] = None,
) -> UploaderInterface:
    """
    Quick uploader creation with simple mock override.

    Example:
        uploader = create_uploader(transfer=webdav_put)
        uploader = create_uploader(force_mock=True)  # Testing
    """
    mode = "mock" if force_mock else "auto"
    return UploaderFactory.create_uploader(mode=mode, transfer=transfer, move_dir=move_dir)
