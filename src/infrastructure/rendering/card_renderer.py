"""PDF business-card renderer built on ReportLab."""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from io import BytesIO

import structlog
from reportlab.lib.colors import HexColor
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen.canvas import Canvas

from core.config import OverflowPolicy
from core.exceptions import CardRenderError
from domain.entities.link import LinkDescriptor
from domain.entities.profile import Profile
from infrastructure.rendering.layout import CardLayout

logger = structlog.get_logger()

NAME_PLACEHOLDER = "Unnamed"
ELLIPSIS = "..."


@dataclass(frozen=True, slots=True)
class RenderedCard:
    """Finished card document."""

    content: bytes
    page_count: int
    link_count: int
    dropped_count: int = 0


def fit_text(text: str, font: str, size: float, max_width: float) -> str:
    """Cut text down with a trailing ellipsis until it fits max_width."""
    if stringWidth(text, font, size) <= max_width:
        return text
    while text and stringWidth(text + ELLIPSIS, font, size) > max_width:
        text = text[:-1]
    return text + ELLIPSIS


class _CardDrawing:
    """Mutable state of one render pass: the canvas, the cursor, page count."""

    def __init__(self, pdf: Canvas, layout: CardLayout) -> None:
        self.pdf = pdf
        self.layout = layout
        self.y = layout.content_top
        self.page_count = 1

    def fill(self, color: str) -> None:
        self.pdf.setFillColor(HexColor(color))

    def draw_chrome(self) -> None:
        """Background, card panel and top bar."""
        layout = self.layout
        palette = layout.palette
        pdf = self.pdf

        self.fill(palette.background)
        pdf.rect(
            layout.margin,
            layout.margin,
            layout.page_width - 2 * layout.margin,
            layout.page_height - 2 * layout.margin,
            stroke=0,
            fill=1,
        )
        self.fill(palette.panel)
        pdf.rect(
            layout.panel_left,
            layout.panel_bottom,
            layout.panel_width,
            layout.panel_height,
            stroke=0,
            fill=1,
        )
        self.fill(palette.top_bar)
        pdf.rect(
            layout.panel_left,
            layout.panel_top - layout.top_bar_height,
            layout.panel_width,
            layout.top_bar_height,
            stroke=0,
            fill=1,
        )

    def draw_footer(self) -> None:
        layout = self.layout
        self.fill(layout.palette.footer)
        self.pdf.setFont(layout.footer_font, layout.footer_size)
        self.pdf.drawCentredString(layout.content_center, layout.footer_baseline, layout.footer_text)

    def new_page(self) -> None:
        self.draw_footer()
        self.pdf.showPage()
        self.page_count += 1
        self.draw_chrome()
        self.y = self.layout.content_top

    def draw_name(self, name: str) -> None:
        """Centered, word-wrapped name; shrinks the font for long words."""
        layout = self.layout
        text = name.strip() or NAME_PLACEHOLDER
        size = layout.name_size
        lines = simpleSplit(text, layout.name_font, size, layout.content_width)
        while size > layout.name_min_size and any(
            stringWidth(line, layout.name_font, size) > layout.content_width for line in lines
        ):
            size -= 2
            lines = simpleSplit(text, layout.name_font, size, layout.content_width)

        if len(lines) > layout.name_max_lines:
            lines = lines[: layout.name_max_lines]
            lines[-1] = fit_text(lines[-1] + ELLIPSIS, layout.name_font, size, layout.content_width)
        lines = [fit_text(line, layout.name_font, size, layout.content_width) for line in lines]

        self.fill(layout.palette.name)
        self.pdf.setFont(layout.name_font, size)
        leading = size * layout.name_leading
        for line in lines:
            self.y -= size
            self.pdf.drawCentredString(layout.content_center, self.y, line)
            self.y -= leading - size

    def draw_contacts(self, contacts: Sequence[LinkDescriptor]) -> None:
        if not contacts:
            return
        layout = self.layout
        self.y -= layout.section_gap
        self.fill(layout.palette.contact)
        self.pdf.setFont(layout.contact_font, layout.contact_size)
        for contact in contacts:
            text = fit_text(contact.label, layout.contact_font, layout.contact_size, layout.content_width)
            self.y -= layout.contact_size
            self.pdf.drawCentredString(layout.content_center, self.y, text)
            width = stringWidth(text, layout.contact_font, layout.contact_size)
            left = layout.content_center - width / 2
            self.pdf.linkURL(
                contact.url,
                (left, self.y - 2, left + width, self.y + layout.contact_size),
                relative=0,
                thickness=0,
            )
            self.y -= layout.contact_leading - layout.contact_size

    def draw_divider(self) -> None:
        layout = self.layout
        self.y -= layout.section_gap
        self.pdf.setStrokeColor(HexColor(layout.palette.divider))
        self.pdf.setLineWidth(1)
        self.pdf.line(layout.content_left, self.y, layout.content_left + layout.content_width, self.y)
        self.y -= layout.section_gap

    def fits_entry(self) -> bool:
        return self.y - self.layout.entry_height >= self.layout.content_bottom

    def draw_entry(self, link: LinkDescriptor) -> None:
        """One clickable link box whose top edge sits on the cursor."""
        layout = self.layout
        palette = layout.palette
        pdf = self.pdf
        left = layout.content_left
        right = left + layout.content_width
        top = self.y
        bottom = top - layout.entry_height
        middle = bottom + layout.entry_height / 2

        self.fill(palette.entry_fill)
        pdf.roundRect(left, bottom, layout.content_width, layout.entry_height, layout.entry_radius, stroke=0, fill=1)

        badge_x = left + layout.entry_radius + layout.badge_radius
        self.fill(link.color)
        pdf.circle(badge_x, middle, layout.badge_radius, stroke=0, fill=1)
        self.fill(palette.badge_text)
        pdf.setFont(layout.badge_font, layout.badge_size)
        pdf.drawCentredString(badge_x, middle - layout.badge_size / 3, link.icon)

        text_left = badge_x + layout.badge_radius + 8
        text_width = right - text_left - layout.entry_radius
        self.fill(palette.entry_label)
        pdf.setFont(layout.label_font, layout.label_size)
        pdf.drawString(
            text_left,
            middle + 2,
            fit_text(link.label, layout.label_font, layout.label_size, text_width),
        )
        self.fill(palette.entry_caption)
        pdf.setFont(layout.caption_font, layout.caption_size)
        pdf.drawString(
            text_left,
            middle - layout.caption_size - 2,
            fit_text(link.url, layout.caption_font, layout.caption_size, text_width),
        )

        pdf.linkURL(link.url, (left, bottom, right, top), relative=0, thickness=0)
        self.y = bottom - layout.entry_spacing

    def draw_placeholder(self) -> None:
        layout = self.layout
        self.y -= layout.placeholder_size
        self.fill(layout.palette.placeholder)
        self.pdf.setFont(layout.placeholder_font, layout.placeholder_size)
        self.pdf.drawCentredString(layout.content_center, self.y, layout.placeholder_text)


class CardRenderer:
    """Render a profile and its normalized links into a PDF card.

    A renderer holds configuration only; every call to ``render`` is an
    independent pass, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        layout: CardLayout | None = None,
        overflow_policy: OverflowPolicy = OverflowPolicy.NEW_PAGE,
        compress: bool = True,
        author: str = "",
    ) -> None:
        self.layout = layout or CardLayout()
        self.overflow_policy = overflow_policy
        self.compress = compress
        self.author = author

    @contextmanager
    def _open_document(self, profile: Profile) -> Iterator[tuple[Canvas, BytesIO]]:
        buffer = BytesIO()
        try:
            pdf = Canvas(
                buffer,
                pagesize=(self.layout.page_width, self.layout.page_height),
                pageCompression=1 if self.compress else 0,
                invariant=1,
            )
            pdf.setTitle(profile.name.strip() or NAME_PLACEHOLDER)
            if self.author:
                pdf.setAuthor(self.author)
            yield pdf, buffer
        finally:
            buffer.close()

    def render(
        self,
        profile: Profile,
        links: Sequence[LinkDescriptor],
        contacts: Sequence[LinkDescriptor] = (),
    ) -> RenderedCard:
        """
        Lay out the card in a single top-to-bottom pass.

        Raises:
            CardRenderError: If anything goes wrong while drawing; no partial
                document is returned.
        """
        try:
            with self._open_document(profile) as (pdf, buffer):
                drawing = _CardDrawing(pdf, self.layout)
                drawing.draw_chrome()
                drawing.draw_name(profile.name)
                drawing.draw_contacts(contacts)
                drawing.draw_divider()

                drawn = 0
                if not links:
                    drawing.draw_placeholder()
                for link in links:
                    if not drawing.fits_entry():
                        if self.overflow_policy == OverflowPolicy.TRUNCATE:
                            break
                        drawing.new_page()
                    drawing.draw_entry(link)
                    drawn += 1

                drawing.draw_footer()
                pdf.showPage()
                pdf.save()
                content = buffer.getvalue()
        except Exception as exc:
            logger.error(
                "card_render_failed",
                profile_id=profile.id,
                error=str(exc),
                error_type=type(exc).__name__,
                exc_info=True,
            )
            raise CardRenderError(profile.id, reason=type(exc).__name__) from exc

        return RenderedCard(
            content=content,
            page_count=drawing.page_count,
            link_count=drawn,
            dropped_count=len(links) - drawn,
        )
