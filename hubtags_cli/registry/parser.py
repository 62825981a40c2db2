"""Parse ``<organization>/<image>`` references."""

from __future__ import annotations

from dataclasses import dataclass

#: Namespace Docker Hub uses for official images.
DEFAULT_ORGANIZATION = "library"


class ImageReferenceError(ValueError):
    """Raised when an image reference cannot be parsed."""


class MissingInput(ImageReferenceError):
    """Raised when no image reference was given."""


class InvalidFormat(ImageReferenceError):
    """Raised when a reference has more than one ``/`` separator."""


@dataclass(frozen=True)
class ImageRef:
    """Reference to a Docker Hub repository.

    Attributes:
        organization: Namespace owning the image (e.g. ``library``).
        image: Repository name inside the namespace (e.g. ``nginx``).
    """

    organization: str
    image: str

    @property
    def repository(self) -> str:
        """Return the full ``organization/image`` path."""
        return f"{self.organization}/{self.image}"


def parse_image_reference(data: str | None) -> ImageRef:
    """Split an image reference into organization and image name.

    Supported formats:

    * ``nginx`` (official image, organization defaults to ``library``)
    * ``nginxinc/nginx-unprivileged``

    Args:
        data: The reference string.

    Returns:
        An :class:`ImageRef` with both parts kept verbatim.

    Raises:
        MissingInput: If *data* is empty or ``None``.
        InvalidFormat: If *data* contains more than one ``/``.
    """
    if not data:
        raise MissingInput("image is required")

    parts = data.split("/")
    if len(parts) == 1:
        return ImageRef(organization=DEFAULT_ORGANIZATION, image=parts[0])
    if len(parts) == 2:
        return ImageRef(organization=parts[0], image=parts[1])

    raise InvalidFormat(
        f"Invalid image format '{data}', must be <ORGANIZATION>/<IMAGE>"
    )
