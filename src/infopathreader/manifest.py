"""Reader for the `manifest.xsf` form definition."""

from __future__ import annotations

from lxml import etree

from infopathreader.exceptions import ManifestError
from infopathreader.logging import get_logger
from infopathreader.processing.xml import NAMESPACES, XSF_NAMESPACE, parse_xml
from infopathreader.typing.models import Manifest, SubmitInfo, View

logger = get_logger(__name__)

MANIFEST_MEMBER = "manifest.xsf"
SCHEMA_MEMBER = "myschema.xsd"

_ROOT_ELEMENT_XPATH = (
    f'//xsf:package/xsf:files/xsf:file[@name="{SCHEMA_MEMBER}"]'
    '/xsf:fileProperties/xsf:property[@name="rootElement"]/@value'
)


class ManifestReader:
    """Extract root element, views and submit declaration from a manifest."""

    def __init__(self, data: bytes, *, archive: str | None = None) -> None:
        """Parse the manifest.

        Args:
            data (bytes): Raw `manifest.xsf` content.
            archive (str | None): Container name used in error messages.

        Raises:
            ManifestError: If the manifest is not well-formed XML.
        """
        self._archive = archive
        try:
            self._document = parse_xml(data)
        except etree.XMLSyntaxError as exc:
            raise ManifestError(message=f"malformed manifest: {exc}", archive=archive) from exc

    def read_root_element_name(self) -> str:
        """Return the root element name declared for `myschema.xsd`.

        Raises:
            ManifestError: If no root element property exists.

        Returns:
            str: Root element name, usually `myFields`.
        """
        values = self._document.xpath(_ROOT_ELEMENT_XPATH, namespaces=NAMESPACES)
        if not values or not str(values[0]):
            raise ManifestError(message="root element not found", archive=self._archive)
        return str(values[0])

    def read_views(self) -> list[View]:
        """Collect view declarations in manifest order.

        Raises:
            ManifestError: If the manifest declares no usable view.

        Returns:
            list[View]: Views with their main pane stylesheet.
        """
        views: list[View] = []
        for element in self._document.iter(f"{{{XSF_NAMESPACE}}}view"):
            name = element.get("name", "")
            mainpane = element.find(f".//{{{XSF_NAMESPACE}}}mainpane")
            transform = mainpane.get("transform", "") if mainpane is not None else ""
            if not name or not transform:
                logger.warning("Skipping view without main pane transform", extra={"view": name})
                continue
            views.append(View(name=name, transform=transform))

        if not views:
            raise ManifestError(message="no views found", archive=self._archive)
        return views

    def read_default_view_name(self) -> str | None:
        """Return the `default` attribute of the views declaration, if any."""
        views = self._document.find(f".//{{{XSF_NAMESPACE}}}views")
        if views is None:
            return None
        return views.get("default") or None

    def read_submit_info(self) -> SubmitInfo | None:
        """Return the HTTP submit declaration.

        Returns:
            SubmitInfo | None: Action and method, or None when the form declares
            no HTTP submit.
        """
        submit = self._document.find(f".//{{{XSF_NAMESPACE}}}submit")
        if submit is None:
            return None
        handler = submit.find(f".//{{{XSF_NAMESPACE}}}useHttpHandler")
        if handler is None:
            logger.info("Submit declaration has no HTTP handler", extra={"archive": self._archive})
            return None
        return SubmitInfo(action=handler.get("href") or None, method=handler.get("method") or None)

    def read(self) -> Manifest:
        """Read everything the reader needs from the manifest.

        Returns:
            Manifest: Parsed manifest information.
        """
        return Manifest(
            root_element=self.read_root_element_name(),
            views=self.read_views(),
            default_view=self.read_default_view_name(),
            submit=self.read_submit_info(),
        )
