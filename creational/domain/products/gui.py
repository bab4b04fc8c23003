"""
GUI Variant Families
====================
Mac and Windows implementations of Button and Checkbox.
"""

from ..interfaces.products import Button, Checkbox, GuiVariant


class MacButton(Button):
    variant = GuiVariant.MAC

    def render(self) -> str:
        return "[Mac style button]"


class MacCheckbox(Checkbox):
    variant = GuiVariant.MAC

    def render(self) -> str:
        return "[Mac style checkbox]"


class WindowsButton(Button):
    variant = GuiVariant.WINDOWS

    def render(self) -> str:
        return "[Windows style button]"


class WindowsCheckbox(Checkbox):
    variant = GuiVariant.WINDOWS

    def render(self) -> str:
        return "[Windows style checkbox]"


GUI_FAMILIES = {
    GuiVariant.MAC: {
        MacButton.kind: MacButton,
        MacCheckbox.kind: MacCheckbox,
    },
    GuiVariant.WINDOWS: {
        WindowsButton.kind: WindowsButton,
        WindowsCheckbox.kind: WindowsCheckbox,
    },
}
