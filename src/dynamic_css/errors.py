"""Error types raised while building dynamic CSS settings."""


class DescriptorError(Exception):
    """Raised when a CSS property descriptor or setting definition is malformed."""

    def __init__(
        self,
        message: str,
        index: int | None = None,
        setting_id: str | None = None,
    ):
        self.index = index
        self.setting_id = setting_id
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        location = []
        if self.setting_id is not None:
            location.append(f"setting={self.setting_id}")
        if self.index is not None:
            location.append(f"css_props[{self.index}]")
        if location:
            return f"{message} [{' '.join(location)}]"
        return message
