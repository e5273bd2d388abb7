"""
Upload Job Builder

Turns a resolved (account, media) pair and the upload policy into the job
descriptor handed to the uploader. Never fails: a capture without a usable
name still gets a generated one.
"""

import logging
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from accounts.interfaces.account_registry_interface import Account
from content.interfaces.content_resolver_interface import MediaInfo
from core.constants import LocalBehaviour, MediaKind
from upload.constants import GENERATED_NAME_TIMESTAMP_FORMAT
from upload.interfaces.uploader_interface import UploadJob
from upload.naming import RemoteNamingPolicy

if TYPE_CHECKING:
    from scheduling.config import UploadPolicyConfig


class UploadJobBuilder:
    """
    Builds UploadJob descriptors.

    Usage:
        builder = UploadJobBuilder(RemoteNamingPolicy())
        job = builder.build(account, media_info, MediaKind.PICTURE, policy)
    """

    def __init__(self, naming: Optional[RemoteNamingPolicy] = None):
        self.logger = logging.getLogger(__name__)
        self.naming = naming or RemoteNamingPolicy()

    def build(
        self,
        account: Account,
        media_info: MediaInfo,
        kind: MediaKind,
        config: "UploadPolicyConfig",
    ) -> UploadJob:
        """
        Build the job for one account.

        Args:
            account: Target account
            media_info: Resolved local file details
            kind: Kind of media
            config: Upload policy (only local behaviour is read)

        Returns:
            UploadJob
        """
        name = self._display_name(media_info, kind)

        return UploadJob(
            account_name=account.name,
            local_file_path=media_info.file_path,
            remote_file_path=self.naming.remote_path(kind, name),
            mime_type=media_info.mime_type,
            local_behaviour=self._local_behaviour(config),
            kind=kind,
        )

    def build_all(
        self,
        accounts: List[Account],
        media_info: MediaInfo,
        kind: MediaKind,
        config: "UploadPolicyConfig",
    ) -> List[UploadJob]:
        """
        Build one job per account for the same capture.

        Only the last job carries MOVE; the earlier ones FORGET, so the file
        stays in place until every account has been sent its copy.

        Returns:
            Jobs in account order
        """
        jobs = [self.build(account, media_info, kind, config) for account in accounts]
        return [
            replace(job, local_behaviour=LocalBehaviour.FORGET)
            if index < len(jobs) - 1
            else job
            for index, job in enumerate(jobs)
        ]

    def _local_behaviour(self, config: "UploadPolicyConfig") -> LocalBehaviour:
        """FORGET unless the policy explicitly asks to MOVE"""
        if config.local_behaviour_on_success == LocalBehaviour.MOVE:
            self.logger.debug("Upload file and move it to the local upload folder")
            return LocalBehaviour.MOVE
        return LocalBehaviour.FORGET

    def _display_name(self, media_info: MediaInfo, kind: MediaKind) -> str:
        """Best-effort remote file name"""
        if media_info.display_name and media_info.display_name.strip():
            return media_info.display_name.strip()

        file_name = Path(media_info.file_path or "").name
        if file_name:
            return file_name

        generated = f"{kind.value}_{datetime.now().strftime(GENERATED_NAME_TIMESTAMP_FORMAT)}"
        self.logger.warning(
            f"Capture {media_info.file_path!r} has no name, using {generated}"
        )
        return generated
