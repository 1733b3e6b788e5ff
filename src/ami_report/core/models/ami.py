"""Simple data models for AMI report groups."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ImageInfo:
    """Descriptive metadata of an AMI.

    The all-empty value stands for an image the catalog did not return.
    """
    description: str = ""
    name: str = ""
    location: str = ""
    owner_id: str = ""

    def to_dict(self) -> Dict[str, str]:
        """Wire representation with empty fields omitted."""
        fields = {
            "ImageDescription": self.description,
            "ImageName": self.name,
            "ImageLocation": self.location,
            "OwnerID": self.owner_id,
        }
        return {key: value for key, value in fields.items() if value}

    @classmethod
    def from_aws_image(cls, image: Dict[str, Any]) -> "ImageInfo":
        """Create ImageInfo from AWS image data."""
        return cls(
            description=image.get("Description") or "",
            name=image.get("Name") or "",
            location=image.get("ImageLocation") or "",
            owner_id=image.get("OwnerId") or "",
        )


@dataclass
class AMIGroup:
    """All instances launched from one AMI, with the AMI's metadata."""
    image_id: str
    image: ImageInfo = field(default_factory=ImageInfo)
    instance_ids: List[str] = field(default_factory=list)

    def add_instance(self, instance_id: str) -> bool:
        """Append an instance id; returns False if it was already in the group."""
        if instance_id in self.instance_ids:
            return False
        self.instance_ids.append(instance_id)
        return True

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.image_id:
            data["AMI"] = self.image_id
        data["Image"] = self.image.to_dict()
        if self.instance_ids:
            data["InstanceIds"] = list(self.instance_ids)
        return data
