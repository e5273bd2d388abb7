"""
Instant Upload Scheduler

Top-level coordinator for capture-triggered uploads.
Wires the policy evaluator, account resolver, pending upload store and
uploader together.

Event Flow:
    MediaCaptureEvent → toggle check → content resolution → target accounts
        → policy (network snapshot)
            ALLOW → one job per account → uploader
            DEFER → one pending record per account → store

    ConnectivityEvent → toggle + network check → store snapshot
        → for each record:
            policy defers  → keep for a later event
            file gone      → remove (stale)
            policy ALLOW   → job → uploader → remove

The scheduler holds no state between events. Every failure is logged and
skipped; nothing propagates to the event source.
"""

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Set

from accounts.interfaces.account_registry_interface import (
    Account,
    AccountResolverInterface,
)
from content.interfaces.content_resolver_interface import (
    ContentResolverInterface,
    MediaInfo,
)
from core.constants import LocalBehaviour, MediaKind
from core.network import OFFLINE, NetworkSnapshot, NetworkStateInterface
from scheduling.config import UploadPolicyConfig
from scheduling.constants import CaptureOutcome, PolicyDecision
from scheduling.models import (
    CaptureResult,
    ConnectivityEvent,
    DrainResult,
    MediaCaptureEvent,
)
from scheduling.policy_evaluator import decide, is_upload_enabled, requires_wifi
from storage.interfaces.pending_store_interface import (
    PendingUploadStoreInterface,
    StorageError,
)
from storage.models.pending_upload import PendingUploadRecord
from storage.utils.path_utils import guess_mime_type
from upload.interfaces.uploader_interface import UploaderInterface
from upload.job_builder import UploadJobBuilder


class InstantUploadScheduler:
    """
    Reactive dispatcher for instant uploads.

    Usage:
        scheduler = InstantUploadScheduler(
            config=policy,
            account_resolver=resolver,
            pending_store=store,
            content_resolver=FileSystemContentResolver(),
            network_state=SystemNetworkState(),
            uploader=uploader,
        )
        scheduler.on_media_captured(MediaCaptureEvent(MediaKind.PICTURE, path))
        scheduler.on_connectivity_changed(ConnectivityEvent(True, is_wifi=True))
    """

    def __init__(
        self,
        config: UploadPolicyConfig,
        account_resolver: AccountResolverInterface,
        pending_store: PendingUploadStoreInterface,
        content_resolver: ContentResolverInterface,
        network_state: NetworkStateInterface,
        uploader: UploaderInterface,
        job_builder: Optional[UploadJobBuilder] = None,
    ):
        self.logger = logging.getLogger(__name__)

        self.config = config
        self.account_resolver = account_resolver
        self.pending_store = pending_store
        self.content_resolver = content_resolver
        self.network_state = network_state
        self.uploader = uploader
        self.job_builder = job_builder or UploadJobBuilder()

        self.logger.info(
            f"Instant upload scheduler initialized "
            f"(pictures: {config.picture_upload_enabled}, "
            f"videos: {config.video_upload_enabled})"
        )

    # =========================================================================
    # CAPTURE EVENTS
    # =========================================================================

    def on_media_captured(self, event: MediaCaptureEvent) -> CaptureResult:
        """
        Handle a new picture or video.

        Args:
            event: Capture event

        Returns:
            CaptureResult describing what was done
        """
        kind = event.kind
        self.logger.info(f"New {kind.value} received: {event.media_ref}")

        if not is_upload_enabled(kind, self.config):
            self.logger.debug(f"Instant {kind.value} upload disabled, ignoring")
            return CaptureResult(CaptureOutcome.DISABLED)

        media_info = self._resolve_media(event)
        if media_info is None:
            return CaptureResult(CaptureOutcome.RESOLUTION_FAILED)

        accounts = self.account_resolver.resolve()
        if not accounts:
            self.logger.warning(
                f"No account found for instant upload of {media_info.file_path}, aborting"
            )
            return CaptureResult(CaptureOutcome.NO_TARGET_ACCOUNTS)

        network = self._network_snapshot()
        decision = decide(kind, self.config, network)
        self.logger.debug(
            f"Policy for {kind.value} on {network.label}: {decision.value}"
        )

        if decision == PolicyDecision.ALLOW:
            return self._dispatch(kind, media_info, accounts)

        if decision == PolicyDecision.DEFER:
            return self._defer(kind, media_info, accounts)

        return CaptureResult(CaptureOutcome.DISABLED)

    def _resolve_media(self, event: MediaCaptureEvent) -> Optional[MediaInfo]:
        """Resolve the capture's local file, None on any failure"""
        try:
            media_info = self.content_resolver.resolve(event.media_ref, event.kind)
        except Exception as e:
            self.logger.error(
                f"Failed to resolve new {event.kind.value} {event.media_ref}: {e}"
            )
            return None

        if media_info is None:
            self.logger.error(f"Failed to resolve new {event.kind.value}!")
        return media_info

    def _network_snapshot(self) -> NetworkSnapshot:
        """Current network conditions; failures count as offline"""
        try:
            return self.network_state.snapshot()
        except Exception as e:
            self.logger.warning(f"Network state unavailable, assuming offline: {e}")
            return OFFLINE

    def _dispatch(
        self,
        kind: MediaKind,
        media_info: MediaInfo,
        accounts: List[Account],
    ) -> CaptureResult:
        """
        Hand one job per account to the uploader.

        A job the uploader rejects is queued as a pending record instead.
        The outcome is DISPATCHED as soon as one job was accepted, DEFERRED
        when every job was queued instead, STORE_UNAVAILABLE when a rejected
        job could not be queued either.
        """
        result = CaptureResult(CaptureOutcome.DISPATCHED)

        jobs = self.job_builder.build_all(accounts, media_info, kind, self.config)
        for account, job in zip(accounts, jobs):
            try:
                self.uploader.submit(job)
                result.dispatched += 1
            except Exception as e:
                self.logger.error(
                    f"Uploader rejected {job.local_file_path} for {account.name}: {e}"
                )
                record = PendingUploadRecord(account.name, media_info.file_path, kind)
                if self._enqueue(record):
                    result.deferred += 1
                else:
                    result.failed += 1

        if result.dispatched == 0:
            if result.failed:
                result.outcome = CaptureOutcome.STORE_UNAVAILABLE
            else:
                result.outcome = CaptureOutcome.DEFERRED

        self.logger.info(
            f"Dispatched {media_info.file_path} to {result.dispatched}/{len(accounts)} "
            f"accounts ({result.deferred} queued, {result.failed} lost)"
        )
        return result

    def _defer(
        self,
        kind: MediaKind,
        media_info: MediaInfo,
        accounts: List[Account],
    ) -> CaptureResult:
        """Queue one pending record per account"""
        result = CaptureResult(CaptureOutcome.DEFERRED)

        for account in accounts:
            record = PendingUploadRecord(account.name, media_info.file_path, kind)
            if self._enqueue(record):
                result.deferred += 1
            else:
                result.failed += 1

        if result.failed:
            result.outcome = CaptureOutcome.STORE_UNAVAILABLE
            self.logger.error(
                f"Could not persist {result.failed} deferred upload(s) of "
                f"{media_info.file_path}"
            )
        else:
            self.logger.info(
                f"Deferred {media_info.file_path} for {result.deferred} account(s)"
            )
        return result

    def _enqueue(self, record: PendingUploadRecord) -> bool:
        """Persist a record; False if the store failed"""
        try:
            self.pending_store.enqueue(record)
            return True
        except StorageError as e:
            self.logger.error(f"Pending upload store unavailable: {e}")
            return False

    # =========================================================================
    # CONNECTIVITY EVENTS
    # =========================================================================

    def on_connectivity_changed(self, event: ConnectivityEvent) -> DrainResult:
        """
        Drain pending uploads when the network allows it.

        Args:
            event: Connectivity event

        Returns:
            DrainResult with per-record counts
        """
        network = event.to_snapshot()

        if not (self.config.picture_upload_enabled or self.config.video_upload_enabled):
            self.logger.debug("Instant upload disabled, don't upload anything")
            return DrainResult(skipped_reason="disabled")

        if not network.has_connectivity:
            self.logger.debug("No connectivity, pending uploads stay queued")
            return DrainResult(skipped_reason="offline")

        try:
            records = self.pending_store.list_all()
        except StorageError as e:
            self.logger.error(f"Cannot read pending uploads: {e}")
            return DrainResult(skipped_reason="store_unavailable", errors=[str(e)])

        self.logger.info(f"Draining {len(records)} pending upload(s) ({network.label})")

        drainable = self._drainable_kinds(network)
        last_for_file = self._last_record_per_file(records, drainable)
        result = DrainResult()
        for index, record in enumerate(records):
            try:
                self._drain_record(
                    record,
                    drainable,
                    result,
                    may_move=last_for_file.get(record.file_path) == index,
                )
            except Exception as e:
                result.failed += 1
                result.errors.append(f"{record.file_path}: {e}")
                self.logger.error(f"Failed to drain {record}: {e}")

        self.logger.info(
            f"Drain complete: {result.dispatched} dispatched, "
            f"{result.stale_removed} stale, {result.kept} kept, {result.failed} failed"
        )
        return result

    def _drainable_kinds(self, network: NetworkSnapshot) -> Set[MediaKind]:
        """Kinds whose policy allows uploading under these conditions"""
        return {
            kind
            for kind in MediaKind
            if is_upload_enabled(kind, self.config)
            and (network.is_wifi or not requires_wifi(kind, self.config))
        }

    @staticmethod
    def _last_record_per_file(
        records: List[PendingUploadRecord],
        drainable: Set[MediaKind],
    ) -> Dict[str, int]:
        """Index of the last drainable record for each local file"""
        return {
            record.file_path: index
            for index, record in enumerate(records)
            if record.kind in drainable
        }

    def _drain_record(
        self,
        record: PendingUploadRecord,
        drainable: Set[MediaKind],
        result: DrainResult,
        may_move: bool = True,
    ) -> None:
        """
        Dispatch, drop or keep one record; errors propagate to the caller.

        Only the last record drained for a file (may_move) keeps a MOVE
        local behaviour; the file must stay for the other accounts.
        """
        if record.kind not in drainable:
            result.kept += 1
            return

        if not record.file_exists():
            self.logger.warning(
                f"Instant upload file {record.file_path} doesn't exist anymore"
            )
            self.pending_store.remove(record)
            result.stale_removed += 1
            return

        media_info = MediaInfo(
            file_path=record.file_path,
            display_name=record.file_name,
            mime_type=guess_mime_type(record.file_path),
        )
        job = self.job_builder.build(
            Account(record.account_name),
            media_info,
            record.kind,
            self.config,
        )
        if not may_move:
            job = replace(job, local_behaviour=LocalBehaviour.FORGET)

        self.uploader.submit(job)
        result.dispatched += 1

        if not self.pending_store.remove(record):
            self.logger.debug(f"Record already gone after dispatch: {record}")
