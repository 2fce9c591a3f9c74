"""
Artifact Store

Issues revocable handles for binary artifacts. Each handle is backed by a
temporary file and exposes a file:// URI a viewer can load. Handles must be
revoked exactly once; revoking twice (or revoking a handle this store never
issued) raises ArtifactHandleError instead of silently succeeding.
"""

import itertools
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

from resumekit.contexts.rendering.exceptions import ArtifactHandleError
from resumekit.contexts.rendering.logger import log_artifact_event

load_dotenv()
ARTIFACT_DIR = os.getenv("RESUMEKIT_ARTIFACT_DIR")

EXTENSIONS = {"application/pdf": ".pdf", "text/html": ".html"}


@dataclass(frozen=True)
class ArtifactHandle:
    """
    A live reference to a stored artifact.

    Attributes:
        handle_id: Store-unique id
        uri: file:// URI of the backing file
        path: Backing file
        media_type: MIME type of the content
        size: Content size in bytes
    """

    handle_id: str
    uri: str
    path: Path
    media_type: str
    size: int


class ArtifactStore:
    """
    Temp-file backed handle issuer.

    Attributes:
        directory: Private directory holding live artifacts
        created_count: Handles issued so far
        revoked_count: Handles revoked so far
    """

    def __init__(self, base_dir: Optional[Path] = None):
        base = Path(base_dir or ARTIFACT_DIR or tempfile.gettempdir())
        base.mkdir(parents=True, exist_ok=True)
        self.directory = Path(tempfile.mkdtemp(prefix="resumekit-", dir=str(base)))
        self._live: Dict[str, ArtifactHandle] = {}
        self._ids = itertools.count(1)
        self.created_count = 0
        self.revoked_count = 0

    def create(self, artifact) -> ArtifactHandle:
        """
        Store an artifact and issue a handle for it.

        Args:
            artifact: BinaryArtifact (anything with content, template_id, media_type)

        Returns:
            Live ArtifactHandle
        """
        handle_id = f"{artifact.template_id}-{next(self._ids)}"
        path = self.directory / f"{handle_id}{EXTENSIONS.get(artifact.media_type, '.bin')}"
        path.write_bytes(artifact.content)

        handle = ArtifactHandle(
            handle_id=handle_id,
            uri=path.as_uri(),
            path=path,
            media_type=artifact.media_type,
            size=len(artifact.content),
        )
        self._live[handle_id] = handle
        self.created_count += 1
        log_artifact_event("Created", handle_id, path)
        return handle

    def revoke(self, handle: ArtifactHandle) -> None:
        """
        Release a handle and delete its backing file.

        Raises:
            ArtifactHandleError: If the handle is not live in this store
        """
        if self._live.get(handle.handle_id) is not handle:
            raise ArtifactHandleError("Handle already released or not issued by this store", handle.handle_id, handle.path)

        del self._live[handle.handle_id]
        handle.path.unlink(missing_ok=True)
        self.revoked_count += 1
        log_artifact_event("Revoked", handle.handle_id, handle.path)

    def is_live(self, handle: ArtifactHandle) -> bool:
        return self._live.get(handle.handle_id) is handle

    def live_handles(self) -> List[ArtifactHandle]:
        return list(self._live.values())

    @property
    def live_count(self) -> int:
        return len(self._live)

    def close(self) -> None:
        """Revoke every live handle and remove the store directory."""
        for handle in list(self._live.values()):
            self.revoke(handle)
        shutil.rmtree(self.directory, ignore_errors=True)
