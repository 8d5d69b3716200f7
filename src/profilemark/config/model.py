# profilemark:header:start
#
#   project      : ProfileMark
#   file         : model.py
#   file_relpath : src/profilemark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Provisioning plan model.

A `ProvisionPlan` is an immutable snapshot of everything one provisioning run
does: the package manager commands and package names, the vendor installers, the
static files, the managed profile blocks, the directive lines and the closing
notes. Plans are built from TOML (see `profilemark.config.io`) and can be
rendered back to TOML for ``dump-config``.

Scope:
    - *In scope*: data shapes, field-level defaults and validation.
    - *Out of scope*: executing the plan (`profilemark.provision`) and file I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from profilemark.config.io import (
    get_bool,
    get_optional_str,
    get_str,
    get_str_list,
    get_table,
    get_table_list,
    load_default_plan_dict,
    load_plan_resource_text,
    load_toml_file,
)
from profilemark.config.keys import Toml
from profilemark.config.logging import get_logger
from profilemark.core.errors import ConfigError, InvalidBlockError, InvalidDirectiveError
from profilemark.profile.blocks import DirectiveLine, ManagedBlock
from profilemark.profile.resource import DEFAULT_PROFILE_PATH, ProfileResource

if TYPE_CHECKING:
    from profilemark.config.io import TomlTable

logger = get_logger(__name__)


@dataclass(frozen=True)
class PackageSpec:
    """System package-manager invocation, treated as an opaque collaborator.

    Each command is an argument vector; repositories and package names are
    appended to the corresponding command. ``names`` are installed before any
    repository is added (they may provide the repository command itself);
    ``repository_packages`` are installed after the repositories.
    """

    update_command: tuple[str, ...] = ()
    upgrade_command: tuple[str, ...] = ()
    install_command: tuple[str, ...] = ()
    repository_command: tuple[str, ...] = ()
    repositories: tuple[str, ...] = ()
    names: tuple[str, ...] = ()
    repository_packages: tuple[str, ...] = ()

    @classmethod
    def from_toml_dict(cls, table: TomlTable) -> PackageSpec:
        """Build the package spec from the ``[packages]`` table."""
        ctx = Toml.SECTION_PACKAGES
        spec = cls(
            update_command=tuple(get_str_list(table, Toml.KEY_UPDATE_COMMAND, context=ctx)),
            upgrade_command=tuple(get_str_list(table, Toml.KEY_UPGRADE_COMMAND, context=ctx)),
            install_command=tuple(get_str_list(table, Toml.KEY_INSTALL_COMMAND, context=ctx)),
            repository_command=tuple(
                get_str_list(table, Toml.KEY_REPOSITORY_COMMAND, context=ctx)
            ),
            repositories=tuple(get_str_list(table, Toml.KEY_REPOSITORIES, context=ctx)),
            names=tuple(get_str_list(table, Toml.KEY_NAMES, context=ctx)),
            repository_packages=tuple(
                get_str_list(table, Toml.KEY_REPOSITORY_PACKAGES, context=ctx)
            ),
        )
        for key, names in (
            (Toml.KEY_NAMES, spec.names),
            (Toml.KEY_REPOSITORY_PACKAGES, spec.repository_packages),
        ):
            if names and not spec.install_command:
                raise ConfigError(
                    f"'{ctx}.{key}' requires '{ctx}.{Toml.KEY_INSTALL_COMMAND}'"
                )
        if spec.repositories and not spec.repository_command:
            raise ConfigError(
                f"'{ctx}.{Toml.KEY_REPOSITORIES}' requires '{ctx}.{Toml.KEY_REPOSITORY_COMMAND}'"
            )
        return spec

    def to_toml_dict(self) -> TomlTable:
        return {
            Toml.KEY_UPDATE_COMMAND: list(self.update_command),
            Toml.KEY_UPGRADE_COMMAND: list(self.upgrade_command),
            Toml.KEY_INSTALL_COMMAND: list(self.install_command),
            Toml.KEY_REPOSITORY_COMMAND: list(self.repository_command),
            Toml.KEY_REPOSITORIES: list(self.repositories),
            Toml.KEY_NAMES: list(self.names),
            Toml.KEY_REPOSITORY_PACKAGES: list(self.repository_packages),
        }


@dataclass(frozen=True)
class InstallerSpec:
    """An opaque vendor installer run through ``sh -c``.

    Attributes:
        name (str): Display name.
        script (str): Shell command line that fetches and runs the installer.
        command (str | None): Program the installer provides; when it is already
            on ``PATH`` the installer is skipped.
    """

    name: str
    script: str
    command: str | None = None

    @classmethod
    def from_toml_dict(cls, table: TomlTable, index: int) -> InstallerSpec:
        ctx = f"{Toml.SECTION_INSTALLERS}[{index}]"
        return cls(
            name=get_str(table, Toml.KEY_NAME, context=ctx),
            script=get_str(table, Toml.KEY_SCRIPT, context=ctx),
            command=get_optional_str(table, Toml.KEY_COMMAND, context=ctx),
        )

    def to_toml_dict(self) -> TomlTable:
        return {
            Toml.KEY_NAME: self.name,
            Toml.KEY_COMMAND: self.command,
            Toml.KEY_SCRIPT: self.script,
        }


@dataclass(frozen=True)
class FileSpec:
    """A static configuration file written once if absent.

    Exactly one of ``content`` (inline text) or ``resource`` (a file bundled in
    ``profilemark/config/resources``) must be given.
    """

    path: str
    content: str | None = None
    resource: str | None = None

    def __post_init__(self) -> None:
        if (self.content is None) == (self.resource is None):
            raise ConfigError(
                f"File {self.path!r}: exactly one of "
                f"'{Toml.KEY_CONTENT}' or '{Toml.KEY_RESOURCE}' is required"
            )

    @classmethod
    def from_toml_dict(cls, table: TomlTable, index: int) -> FileSpec:
        ctx = f"{Toml.SECTION_FILES}[{index}]"
        return cls(
            path=get_str(table, Toml.KEY_PATH, context=ctx),
            content=get_optional_str(table, Toml.KEY_CONTENT, context=ctx),
            resource=get_optional_str(table, Toml.KEY_RESOURCE, context=ctx),
        )

    @property
    def target(self) -> Path:
        """Return the destination path with ``~`` expanded."""
        return Path(self.path).expanduser()

    def resolve_content(self) -> str:
        """Return the text to write, loading bundled resources on demand."""
        if self.content is not None:
            return self.content
        assert self.resource is not None
        return load_plan_resource_text(self.resource)

    def to_toml_dict(self) -> TomlTable:
        return {
            Toml.KEY_PATH: self.path,
            Toml.KEY_RESOURCE: self.resource,
            Toml.KEY_CONTENT: self.content,
        }


def _block_from_toml(table: TomlTable, index: int) -> ManagedBlock:
    ctx = f"{Toml.SECTION_BLOCKS}[{index}]"
    block_id = get_str(table, Toml.KEY_ID, context=ctx)
    start = get_str(table, Toml.KEY_START, context=ctx)
    end = get_str(table, Toml.KEY_END, context=ctx)
    raw_body: Any = table.get(Toml.KEY_BODY, "")
    try:
        if isinstance(raw_body, str):
            return ManagedBlock.from_text(block_id, start, end, raw_body)
        body = get_str_list(table, Toml.KEY_BODY, context=ctx)
        return ManagedBlock(block_id, start, end, tuple(body))
    except InvalidBlockError as exc:
        raise ConfigError(f"{ctx}: {exc}") from exc


def _block_to_toml(block: ManagedBlock) -> TomlTable:
    return {
        Toml.KEY_ID: block.block_id,
        Toml.KEY_START: block.start_marker,
        Toml.KEY_END: block.end_marker,
        Toml.KEY_BODY: "".join(f"{line}\n" for line in block.body),
    }


@dataclass(frozen=True)
class LineSpec:
    """A directive line, optionally conditional on a program being installed.

    Attributes:
        directive (DirectiveLine): The line and its tolerant match pattern.
        when_command (str | None): Only ensure the line when this program is
            on ``PATH`` (e.g. ``starship`` for its init line).
    """

    directive: DirectiveLine
    when_command: str | None = None

    @classmethod
    def from_toml_dict(cls, table: TomlTable, index: int) -> LineSpec:
        ctx = f"{Toml.SECTION_LINES}[{index}]"
        line = get_str(table, Toml.KEY_LINE, context=ctx)
        try:
            directive = DirectiveLine(
                pattern=get_str(table, Toml.KEY_PATTERN, context=ctx, default=line),
                line=line,
                regex=get_bool(table, Toml.KEY_REGEX, context=ctx),
            )
        except InvalidDirectiveError as exc:
            raise ConfigError(f"{ctx}: {exc}") from exc
        return cls(directive, get_optional_str(table, Toml.KEY_WHEN_COMMAND, context=ctx))

    def to_toml_dict(self) -> TomlTable:
        return {
            Toml.KEY_PATTERN: self.directive.pattern,
            Toml.KEY_LINE: self.directive.line,
            Toml.KEY_REGEX: self.directive.regex,
            Toml.KEY_WHEN_COMMAND: self.when_command,
        }


@dataclass(frozen=True)
class ProvisionPlan:
    """Immutable provisioning plan.

    Attributes:
        profile (str): Shell profile path (``~`` allowed).
        packages (PackageSpec): Package manager commands and package names.
        installers (tuple[InstallerSpec, ...]): Vendor installers, in order.
        files (tuple[FileSpec, ...]): Static files written once if absent.
        blocks (tuple[ManagedBlock, ...]): Managed profile blocks.
        lines (tuple[LineSpec, ...]): Directive lines ensured after the blocks.
        notes (tuple[str, ...]): Closing instructions shown to the user.
    """

    profile: str = DEFAULT_PROFILE_PATH
    packages: PackageSpec = field(default_factory=PackageSpec)
    installers: tuple[InstallerSpec, ...] = ()
    files: tuple[FileSpec, ...] = ()
    blocks: tuple[ManagedBlock, ...] = ()
    lines: tuple[LineSpec, ...] = ()
    notes: tuple[str, ...] = ()

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> ProvisionPlan:
        """Build a plan from a parsed TOML document.

        Raises:
            ConfigError: If a section or value has the wrong shape.
        """
        blocks = tuple(
            _block_from_toml(t, i)
            for i, t in enumerate(get_table_list(data, Toml.SECTION_BLOCKS))
        )
        starts = [b.start_marker for b in blocks]
        if len(set(starts)) != len(starts):
            raise ConfigError("Two blocks share the same start marker")
        return cls(
            profile=get_str(data, Toml.KEY_PROFILE, default=DEFAULT_PROFILE_PATH),
            packages=PackageSpec.from_toml_dict(get_table(data, Toml.SECTION_PACKAGES)),
            installers=tuple(
                InstallerSpec.from_toml_dict(t, i)
                for i, t in enumerate(get_table_list(data, Toml.SECTION_INSTALLERS))
            ),
            files=tuple(
                FileSpec.from_toml_dict(t, i)
                for i, t in enumerate(get_table_list(data, Toml.SECTION_FILES))
            ),
            blocks=blocks,
            lines=tuple(
                LineSpec.from_toml_dict(t, i)
                for i, t in enumerate(get_table_list(data, Toml.SECTION_LINES))
            ),
            notes=tuple(get_str_list(data, Toml.KEY_NOTES)),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the plan as a TOML-compatible dict (see `profilemark.config.io.to_toml`)."""
        return {
            Toml.KEY_PROFILE: self.profile,
            Toml.KEY_NOTES: list(self.notes),
            Toml.SECTION_PACKAGES: self.packages.to_toml_dict(),
            Toml.SECTION_INSTALLERS: [i.to_toml_dict() for i in self.installers],
            Toml.SECTION_FILES: [f.to_toml_dict() for f in self.files],
            Toml.SECTION_BLOCKS: [_block_to_toml(b) for b in self.blocks],
            Toml.SECTION_LINES: [line.to_toml_dict() for line in self.lines],
        }

    def with_profile(self, profile: str | Path | None) -> ProvisionPlan:
        """Return a copy targeting ``profile``; unchanged when ``profile`` is None."""
        if profile is None:
            return self
        return replace(self, profile=str(profile))

    def resource(self) -> ProfileResource:
        """Return the profile resource this plan edits."""
        return ProfileResource.at(self.profile)


def load_plan(path: Path | None = None) -> ProvisionPlan:
    """Load a plan from ``path``, or the bundled default plan when None.

    Raises:
        ConfigError: If the plan cannot be read or is invalid.
    """
    if path is None:
        logger.debug("Using bundled default plan")
        return ProvisionPlan.from_toml_dict(load_default_plan_dict())
    return ProvisionPlan.from_toml_dict(load_toml_file(path))
