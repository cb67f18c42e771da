from infopathreader.exceptions import (
    ArchiveError,
    ArchiveMemberMissingError,
    ManifestError,
    PackageError,
    SchemaError,
    SchemaInconsistencyError,
    SettingsError,
    UnsupportedFeatureError,
    ViewNotFoundError,
    ViewRenderError,
)


def test_root_exception_hierarchy() -> None:
    for error in (
        SettingsError,
        ArchiveError,
        ArchiveMemberMissingError,
        ManifestError,
        SchemaError,
        SchemaInconsistencyError,
        UnsupportedFeatureError,
        ViewNotFoundError,
        ViewRenderError,
    ):
        assert issubclass(error, PackageError)


def test_view_not_found_is_lookup_error() -> None:
    error = ViewNotFoundError(view="Missing", available=["View 1"])

    assert isinstance(error, LookupError)
    assert str(error) == "Unknown view 'Missing'. Available views: View 1"


def test_error_messages_carry_archive_and_member() -> None:
    assert str(ArchiveMemberMissingError(archive="form.xsn", member="view9.xsl")) == (
        "Member 'view9.xsl' not found in archive 'form.xsn'"
    )
    assert str(SchemaError(message="myschema.xsd not found", archive="form.xsn", member="myschema.xsd")) == (
        "myschema.xsd not found (form.xsn:myschema.xsd)"
    )
    assert str(ManifestError(message="no views found")) == "no views found"
