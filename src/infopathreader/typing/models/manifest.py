"""Manifest-centric domain models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from infopathreader.exceptions import ViewNotFoundError


class View(BaseModel):
    """Named view and the stylesheet rendering its main pane."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    transform: str


class SubmitInfo(BaseModel):
    """HTTP submit declaration of a form."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    action: str | None = None
    method: str | None = None

    def to_form_attributes(self) -> dict[str, str]:
        """Return the declared values as `<form>` attributes.

        Returns:
            dict[str, str]: `action`/`method` attributes that are set.
        """
        return {key: value for key, value in (("action", self.action), ("method", self.method)) if value}


class Manifest(BaseModel):
    """Information read from `manifest.xsf`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root_element: str
    views: list[View] = Field(min_length=1)
    default_view: str | None = None
    submit: SubmitInfo | None = None

    @property
    def view_names(self) -> list[str]:
        """Return view names in manifest order."""
        return [view.name for view in self.views]

    @property
    def primary_view(self) -> View:
        """Return the default view when declared, else the first one."""
        if self.default_view is not None:
            for view in self.views:
                if view.name == self.default_view:
                    return view
        return self.views[0]

    def get_view(self, name: str) -> View:
        """Look up a view by name.

        Args:
            name (str): View name.

        Raises:
            ViewNotFoundError: If the manifest declares no such view.

        Returns:
            View: Matching view.
        """
        for view in self.views:
            if view.name == name:
                return view
        raise ViewNotFoundError(view=name, available=self.view_names)
