"""Frame composition: fixed draw order and the hub cutout."""

from .drawing_context import CompositeMode, DrawingContext
from .geometry import DialGeometry
from .render_context import RenderContext
from .shape_builder import ClockFace, HandShapes


class FrameComposer:
    """Turns a clock face into draw calls on a drawing context."""

    def __init__(self, render_context: RenderContext):
        self.context = render_context

    def render(
        self,
        surface: DrawingContext,
        width: float,
        height: float,
        geometry: DialGeometry,
        face: ClockFace,
    ) -> None:
        """
        Draw one frame.

        Later steps paint over earlier ones, so the order below is fixed:
        minute hand under hour hand, second hand over the inner ring, and
        the cutout last so it clears every layer at the hub.

        Args:
            surface: Context to draw on, origin at the surface's top-left corner
            width: Surface width
            height: Surface height
            geometry: Dial sizes used for stroke widths
            face: Shapes to draw, authored around the hub
        """
        if geometry.is_degenerate:
            return

        primary = self.context.primary_color
        accent = self.context.accent_color
        center_x = width / 2
        center_y = height / 2

        surface.stroke(
            face.outer_ring.translated(center_x, center_y), primary, geometry.border_width
        )
        surface.translate(center_x, center_y)

        for numeral in face.numerals:
            surface.draw_text(numeral, primary)

        self._fill_hand(surface, face.minute_hand)
        self._fill_hand(surface, face.hour_hand)
        surface.stroke(face.inner_ring, primary, geometry.ring_width)
        self._fill_hand(surface, face.second_hand)

        with surface.composite_mode(CompositeMode.CLEAR):
            surface.fill(face.cutout, primary)
        surface.stroke(face.cutout, accent, geometry.ring_width)

    def _fill_hand(self, surface: DrawingContext, hand: HandShapes) -> None:
        for part in hand.parts:
            surface.fill(part, hand.spec.color)
