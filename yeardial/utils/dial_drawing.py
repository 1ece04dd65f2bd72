import dearpygui.dearpygui as dpg

from yeardial.core.geometry import AngleMapper
from yeardial.core.render   import DialFrame, DialLayout


def create_dial(tag: str, mapper: AngleMapper, layout: DialLayout, parent=0):
    """
    Call once. Creates the drawlist with bezel, ticks, value text and knob.
    Everything is drawn inside a node translated to the dial centre.
    """
    cx, cy = layout.center
    inner, outer = layout.tick_span
    with dpg.drawlist(width=layout.width, height=layout.height, tag=tag, parent=parent):
        with dpg.draw_node(tag=f"{tag}_node"):
            dpg.draw_circle((0, 0), layout.bezel_radius,
                            color=layout.BEZEL_STROKE, fill=layout.BEZEL_FILL,
                            thickness=1)
            for v in mapper.tick_values(layout.tick_step):
                p1, p2 = mapper.tick_segment(v, inner, outer)
                dpg.draw_line(p1, p2, color=layout.TICK_COLOR, thickness=1)
            dpg.draw_text((0, 0), "", size=layout.TEXT_SIZE,
                          color=layout.TEXT_COLOR, tag=f"{tag}_text")
            dpg.draw_circle((0, 0), layout.knob_radius,
                            color=layout.KNOB_COLOR, fill=layout.KNOB_COLOR,
                            tag=f"{tag}_knob")
    dpg.apply_transform(f"{tag}_node", dpg.create_translation_matrix([cx, cy]))


def update_dial(tag: str, frame: DialFrame, layout: DialLayout):
    """
    Move the *knob* and rewrite the value text. Never recreates items.
    """
    if not dpg.does_item_exist(tag):
        return                       # safeguard
    dpg.configure_item(f"{tag}_knob", center=frame.knob)

    # draw_text anchors top-left. 0.28 em per glyph is an approximate advance
    # for the default font, so centring is close but not pixel exact
    size = layout.TEXT_SIZE
    dpg.configure_item(f"{tag}_text", text=frame.text,
                       pos=(-0.28 * size * len(frame.text), -0.5 * size))
