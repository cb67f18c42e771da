from __future__ import annotations

from pathlib import Path

import pytest

from infopathreader import InfopathDocument
from infopathreader.exceptions import ManifestError, SchemaError, UnsupportedFeatureError, ViewNotFoundError, ViewRenderError
from infopathreader.settings import Settings
from infopathreader.typing.enums import OptionType


def test_open_source_directory(form_dir: Path) -> None:
    document = InfopathDocument.open(form_dir, settings=Settings())

    assert document.root_element == "myFields"
    assert document.list_views() == ["Summary", "Feedback"]
    assert document.manifest.primary_view.name == "Feedback"
    assert document.submit is not None
    assert document.submit.method == "POST"


def test_get_schema(form_document: InfopathDocument) -> None:
    table = form_document.get_schema()

    assert table["name"].default == "Anonymous"
    assert table["country"].option_type == OptionType.MULTISELECT
    assert table["country"].default == "au"
    assert table["feedback"].option_type == OptionType.CHECKBOX
    assert table["feedback"].options == {"good": "Good service", "bad": "Bad service"}
    assert "feedback_good" not in table


def test_get_schema_group_setting(make_archive, form_members: dict[str, bytes]) -> None:
    settings = Settings(GROUP_CHECKBOXES=False)
    document = InfopathDocument(make_archive(form_members), settings=settings)

    assert "feedback_good" in document.get_schema()
    assert "feedback" in document.get_schema(group_checkboxes=True)


def test_get_schema_reads_members_every_time(form_document: InfopathDocument) -> None:
    assert form_document.get_schema() == form_document.get_schema()


def test_get_view_as_is(form_document: InfopathDocument) -> None:
    html = form_document.get_view("Summary")

    assert "<h1>Summary</h1>" in html
    assert "Visitor: Anonymous" in html


def test_get_view_as_form(form_document: InfopathDocument) -> None:
    html = form_document.get_view("Feedback", form_attrs=True)

    assert 'action="http://forms.example.com/feedback/submit.php"' in html
    assert 'method="POST"' in html
    assert 'name="my:name"' in html
    assert 'value="Anonymous"' in html


def test_get_view_with_explicit_attributes(form_document: InfopathDocument) -> None:
    html = form_document.get_view("Feedback", form_attrs={"action": "/local"})

    assert 'action="/local"' in html
    assert "forms.example.com" not in html


def test_get_view_unknown_name(form_document: InfopathDocument) -> None:
    with pytest.raises(ViewNotFoundError, match="Summary, Feedback"):
        form_document.get_view("Nope")

    with pytest.raises(LookupError):
        form_document.get_view("Nope")


def test_get_view_missing_stylesheet(make_archive, form_members: dict[str, bytes]) -> None:
    del form_members["view2.xsl"]
    document = InfopathDocument(make_archive(form_members), settings=Settings())

    with pytest.raises(ViewRenderError, match="view2.xsl"):
        document.get_view("Summary")


def test_get_template(form_document: InfopathDocument) -> None:
    template = form_document.get_template("Feedback")

    assert template.count("<?php echo $this->form['rating']['html']?>") == 1
    assert "<?php echo $this->form['feedback_other']['html']?>" in template
    assert "<?php echo $this->form['__submit__']['html']?>" in template
    assert "<form <?php echo $this->form['attributes']?>>" in template


def test_missing_manifest(make_archive, form_members: dict[str, bytes]) -> None:
    del form_members["manifest.xsf"]

    with pytest.raises(ManifestError, match="manifest.xsf not found"):
        InfopathDocument(make_archive(form_members), settings=Settings())


@pytest.mark.parametrize("member", ["myschema.xsd", "template.xml", "view1.xsl"])
def test_get_schema_missing_member(make_archive, form_members: dict[str, bytes], member: str) -> None:
    del form_members[member]
    document = InfopathDocument(make_archive(form_members), settings=Settings())

    with pytest.raises(SchemaError) as excinfo:
        document.get_schema()

    assert excinfo.value.member == member


def test_get_schema_malformed_member(make_archive, form_members: dict[str, bytes]) -> None:
    form_members["myschema.xsd"] = b"<xsd:schema"
    document = InfopathDocument(make_archive(form_members), settings=Settings())

    with pytest.raises(SchemaError, match="malformed document"):
        document.get_schema()


def test_save_form_is_not_supported(form_document: InfopathDocument, tmp_path: Path) -> None:
    with pytest.raises(UnsupportedFeatureError):
        form_document.save_form(tmp_path / "out.xml", {"name": "x"})
