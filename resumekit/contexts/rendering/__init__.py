"""
Rendering Context

Responsibilities:
- Serializes page trees to HTML and PDF
- Composes (template, data, settings) into binary artifacts
- Issues and revokes temp-file artifact handles
- Runs cancellable preview pipelines per consumer

Owns: Document serialization, artifact lifetime, preview state
Never: Decides layout or content
"""

from resumekit.contexts.rendering.artifact_store import ArtifactHandle, ArtifactStore
from resumekit.contexts.rendering.compositor import (
    BinaryArtifact,
    build_page_tree,
    compose,
    render_resume_file,
)
from resumekit.contexts.rendering.preview import (
    PreviewBoard,
    PreviewError,
    PreviewKey,
    PreviewPipeline,
    PreviewSnapshot,
    PreviewState,
    compositor_generator,
)

__all__ = [
    # Composition
    "BinaryArtifact",
    "build_page_tree",
    "compose",
    "render_resume_file",
    # Artifact handles
    "ArtifactHandle",
    "ArtifactStore",
    # Previews
    "PreviewBoard",
    "PreviewError",
    "PreviewKey",
    "PreviewPipeline",
    "PreviewSnapshot",
    "PreviewState",
    "compositor_generator",
]
