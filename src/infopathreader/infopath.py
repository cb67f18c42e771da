"""Microsoft InfoPath form template reader."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from lxml import etree

from infopathreader.archive import open_archive
from infopathreader.exceptions import (
    ArchiveMemberMissingError,
    ManifestError,
    SchemaError,
    UnsupportedFeatureError,
    ViewRenderError,
)
from infopathreader.logging import get_logger
from infopathreader.manifest import MANIFEST_MEMBER, SCHEMA_MEMBER, ManifestReader
from infopathreader.processing.normalization import convert_field_name
from infopathreader.processing.xml import parse_xml
from infopathreader.schema_inference import FieldTable, infer_schema
from infopathreader.settings import Settings, get_settings
from infopathreader.template_conversion import convert_template
from infopathreader.views import prepare_form_view, render_view

if TYPE_CHECKING:
    from pathlib import Path

    from infopathreader.typing.models import Manifest, SubmitInfo
    from infopathreader.typing.protocol import Archive

logger = get_logger(__name__)

TEMPLATE_MEMBER = "template.xml"

FormAttributes = Mapping[str, str] | bool | None


class InfopathDocument:
    """Read-only view of an InfoPath form template.

    The manifest is read once when the document is opened; schema and view
    requests re-read their members from the archive every time.
    """

    MIME_TYPE = "application/ms-infopath.xml"

    def __init__(self, archive: Archive, *, settings: Settings | None = None) -> None:
        """Read the manifest of a form.

        Args:
            archive (Archive): Container holding the form files.
            settings (Settings | None): Runtime settings.

        Raises:
            ManifestError: If the manifest is absent, malformed or incomplete.
        """
        self._archive = archive
        self._settings = settings or get_settings()
        try:
            data = archive.extract(MANIFEST_MEMBER)
        except ArchiveMemberMissingError as exc:
            raise ManifestError(message=f"{MANIFEST_MEMBER} not found", archive=archive.name) from exc
        self._manifest = ManifestReader(data, archive=archive.name).read()
        logger.info(
            "InfoPath form opened",
            extra={"archive": archive.name, "views": self._manifest.view_names},
        )

    @classmethod
    def open(cls, path: Path, *, settings: Settings | None = None) -> InfopathDocument:
        """Open an `.xsn` file or a directory of form source files.

        Args:
            path (Path): Form template path.
            settings (Settings | None): Runtime settings.

        Returns:
            InfopathDocument: Opened document.
        """
        config = settings or get_settings()
        return cls(open_archive(path, cabextract=config.cabextract_path), settings=config)

    @property
    def archive(self) -> Archive:
        """Return the underlying archive."""
        return self._archive

    @property
    def manifest(self) -> Manifest:
        """Return the parsed manifest."""
        return self._manifest

    @property
    def root_element(self) -> str:
        """Return the root element name, usually `myFields`."""
        return self._manifest.root_element

    @property
    def submit(self) -> SubmitInfo | None:
        """Return the HTTP submit declaration, if any."""
        return self._manifest.submit

    def list_views(self) -> list[str]:
        """List the names of the views available.

        Returns:
            list[str]: View names in manifest order.
        """
        return self._manifest.view_names

    def get_view(self, name: str, form_attrs: FormAttributes = None) -> str:
        """Render a view as HTML using the form's default data.

        Args:
            name (str): View name.
            form_attrs (FormAttributes): None or False leaves the view as is.
                True wraps the body in a form using the manifest's submit
                declaration; a mapping gives the form attributes explicitly.
                Either way single-line text boxes become text inputs.

        Raises:
            ViewNotFoundError: If the manifest declares no such view.
            ViewRenderError: If a member is missing or the transform fails.

        Returns:
            str: Rendered HTML.
        """
        view = self._manifest.get_view(name)
        stylesheet = self._load_view_member(view.transform)

        if form_attrs is not None and form_attrs is not False:
            if isinstance(form_attrs, Mapping):
                attributes = dict(form_attrs)
            else:
                attributes = self.submit.to_form_attributes() if self.submit else {}
            prepare_form_view(stylesheet, attributes)

        data = self._load_view_member(TEMPLATE_MEMBER)
        html = render_view(stylesheet, data)
        logger.info("View rendered", extra={"view": name, "transform": view.transform})
        return html

    def get_template(
        self,
        name: str,
        field_name_converter: Callable[[str], str] = convert_field_name,
    ) -> str:
        """Render a view and convert it into a FormBuilder template.

        Args:
            name (str): View name.
            field_name_converter (Callable[[str], str]): Field name converter.

        Returns:
            str: Template HTML.
        """
        return convert_template(self.get_view(name), field_name_converter)

    def get_schema(self, *, group_checkboxes: bool | None = None) -> FieldTable:
        """Return the form fields inferred from schema, default data and primary view.

        Args:
            group_checkboxes (bool | None): Fold grouped checkboxes into one
                field; defaults to `Settings.group_checkboxes`.

        Raises:
            SchemaError: If a required member is absent or malformed.

        Returns:
            FieldTable: Mapping of field name to descriptor.
        """
        primary = self._manifest.primary_view
        schema = self._load_schema_member(SCHEMA_MEMBER)
        defaults = self._load_schema_member(TEMPLATE_MEMBER)
        view = self._load_schema_member(primary.transform)
        return infer_schema(
            schema=schema,
            defaults=defaults,
            view=view,
            root_element=self.root_element,
            group_checkboxes=self._settings.group_checkboxes if group_checkboxes is None else group_checkboxes,
        )

    def save_form(self, path: Path, data: Mapping[str, str]) -> None:  # noqa: ARG002
        """Write form data as an InfoPath document.

        Raises:
            UnsupportedFeatureError: Always.
        """
        raise UnsupportedFeatureError(feature="saving InfoPath forms")

    def _load_schema_member(self, member: str) -> etree._ElementTree:
        try:
            return parse_xml(self._archive.extract(member))
        except ArchiveMemberMissingError as exc:
            raise SchemaError(message=f"{member} not found", archive=self._archive.name, member=member) from exc
        except etree.XMLSyntaxError as exc:
            raise SchemaError(message=f"malformed document: {exc}", archive=self._archive.name, member=member) from exc

    def _load_view_member(self, member: str) -> etree._ElementTree:
        try:
            return parse_xml(self._archive.extract(member))
        except (ArchiveMemberMissingError, etree.XMLSyntaxError) as exc:
            raise ViewRenderError(message=f"Cannot load {member} from {self._archive.name}: {exc}") from exc
