"""Template data for generated gRPC and REST service proto files."""

from __future__ import annotations

from dataclasses import dataclass, field

from .naming import kebab_case, pascal_case, plural, snake_case


@dataclass(frozen=True)
class ProtoField:
    """One field of a generated proto message."""

    number: int
    name: str
    type: str
    comment: str = ""


@dataclass
class GrpcProtoTemplateData:
    """Values a gRPC service proto file is rendered from."""

    name: str
    module: str
    version: str
    comment: str = ""
    fields: list[ProtoField] = field(default_factory=list)

    def pascal_name(self) -> str:
        """Model name in PascalCase."""
        return pascal_case(self.name)

    def snake_name(self) -> str:
        """Model name in snake_case."""
        return snake_case(self.name)

    def package(self) -> str:
        """Proto package, e.g. ``user.service.v1``."""
        return f"{self.module.lower()}.service.{self.version}"


@dataclass
class RestProtoTemplateData:
    """Values a REST service proto file is rendered from."""

    name: str
    source_module: str
    target_module: str
    version: str
    comment: str = ""

    def pascal_name(self) -> str:
        """Model name in PascalCase."""
        return pascal_case(self.name)

    def path(self) -> str:
        """HTTP path of the resource, e.g. ``/admin/v1/users``."""
        return f"/{self.target_module.lower()}/{self.version}/{kebab_case(plural(self.name))}"

    def source_proto(self) -> str:
        """Import path of the source proto, e.g. ``user/service/v1/user.proto``."""
        return f"{self.source_module.lower()}/service/{self.version}/{self.name.lower()}.proto"

    def source_package(self) -> str:
        """Proto package of the source module, e.g. ``user.service.v1``."""
        return f"{self.source_module.lower()}.service.{self.version}"

    def target_package(self) -> str:
        """Proto package of the target module, e.g. ``admin.service.v1``."""
        return f"{self.target_module.lower()}.service.{self.version}"