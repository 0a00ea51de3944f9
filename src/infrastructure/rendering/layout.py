"""Fixed geometry and palette of a rendered card."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CardPalette:
    """Colors used on the card, as hex strings."""

    background: str = "#4A90E2"
    panel: str = "#FFFFFF"
    top_bar: str = "#2C3E50"
    name: str = "#2C3E50"
    contact: str = "#34495E"
    divider: str = "#E1E5EA"
    entry_fill: str = "#F4F6FA"
    entry_label: str = "#2C3E50"
    entry_caption: str = "#7F8C8D"
    badge_text: str = "#FFFFFF"
    placeholder: str = "#95A5A6"
    footer: str = "#95A5A6"


@dataclass(frozen=True, slots=True)
class CardLayout:
    """Page geometry in PDF points. Nothing here depends on card content."""

    page_width: float = 400
    page_height: float = 600
    margin: float = 50
    card_inset: float = 20
    padding: float = 30

    top_bar_height: float = 8

    name_font: str = "Helvetica-Bold"
    name_size: float = 28
    name_min_size: float = 16
    name_max_lines: int = 3
    name_leading: float = 1.15

    contact_font: str = "Helvetica"
    contact_size: float = 11
    contact_leading: float = 16

    section_gap: float = 14

    entry_height: float = 40
    entry_spacing: float = 10
    entry_radius: float = 6
    badge_radius: float = 13
    badge_font: str = "Helvetica-Bold"
    badge_size: float = 8
    label_font: str = "Helvetica-Bold"
    label_size: float = 12
    caption_font: str = "Helvetica"
    caption_size: float = 8

    placeholder_text: str = "No links yet"
    placeholder_font: str = "Helvetica-Oblique"
    placeholder_size: float = 12

    footer_text: str = "Digital Business Card"
    footer_font: str = "Helvetica"
    footer_size: float = 10
    footer_offset: float = 30

    palette: CardPalette = CardPalette()

    @property
    def panel_left(self) -> float:
        return self.margin + self.card_inset

    @property
    def panel_bottom(self) -> float:
        return self.margin + self.card_inset

    @property
    def panel_width(self) -> float:
        return self.page_width - 2 * (self.margin + self.card_inset)

    @property
    def panel_height(self) -> float:
        return self.page_height - 2 * (self.margin + self.card_inset)

    @property
    def panel_top(self) -> float:
        return self.panel_bottom + self.panel_height

    @property
    def content_left(self) -> float:
        return self.panel_left + self.padding

    @property
    def content_width(self) -> float:
        return self.panel_width - 2 * self.padding

    @property
    def content_center(self) -> float:
        return self.content_left + self.content_width / 2

    @property
    def content_top(self) -> float:
        """First free line below the top bar."""
        return self.panel_top - self.top_bar_height - self.padding

    @property
    def footer_baseline(self) -> float:
        return self.panel_bottom + self.footer_offset

    @property
    def content_bottom(self) -> float:
        """Lowest y an entry may reach before it would collide with the footer."""
        return self.footer_baseline + self.footer_size + self.section_gap
