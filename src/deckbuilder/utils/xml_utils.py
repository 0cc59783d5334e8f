"""
XML Utilities for PowerPoint XML manipulation

python-pptx has no API for outer shadows, fill alpha or letter spacing, so
these helpers edit the DrawingML elements directly.
"""

import logging
from lxml import etree

logger = logging.getLogger(__name__)

A_NS = 'http://schemas.openxmlformats.org/drawingml/2006/main'
NS = {'a': A_NS}

EMU_PER_POINT = 12700
ANGLE_UNITS_PER_DEGREE = 60000


def _qn(tag: str) -> str:
    return f'{{{A_NS}}}{tag}'


def set_run_font_xml(run, font_name: str):
    """
    Set the Latin, East Asian and Complex Script typefaces of a run.

    `run.font.name` only sets <a:latin>; viewers that fall back to the
    theme's East Asian font for symbols then render icon glyphs in the
    wrong face.

    Args:
        run: PowerPoint run object
        font_name: Font name to apply
    """
    rPr = run._r.get_or_add_rPr()

    for tag in ('latin', 'ea', 'cs'):
        existing = rPr.find(f'a:{tag}', NS)
        if existing is not None:
            rPr.remove(existing)

    for tag in ('latin', 'ea', 'cs'):
        elem = etree.SubElement(rPr, _qn(tag))
        elem.set('typeface', font_name)

    logger.debug(f"XML Font Setting: run font set to '{font_name}'")


def set_run_char_spacing(run, spacing_pt: float):
    """
    Set letter spacing of a run.

    Args:
        run: PowerPoint run object
        spacing_pt: Extra spacing between characters in points
    """
    rPr = run._r.get_or_add_rPr()
    # spc is in hundredths of a point
    rPr.set('spc', str(int(round(spacing_pt * 100))))


def set_solid_fill_alpha(parent, opacity: float):
    """
    Set the alpha of the first <a:solidFill> colour under `parent`.

    Args:
        parent: spPr or ln element holding a solid fill
        opacity: 0.0 (transparent) to 1.0 (opaque)
    """
    srgbClr = parent.find('a:solidFill/a:srgbClr', NS)
    if srgbClr is None:
        logger.warning("No solid fill colour found to apply alpha to")
        return

    existing_alpha = srgbClr.find('a:alpha', NS)
    if existing_alpha is not None:
        srgbClr.remove(existing_alpha)

    # Alpha is a percentage * 1000 (0-100000)
    alpha_elem = etree.SubElement(srgbClr, _qn('alpha'))
    alpha_elem.set('val', str(int(round(opacity * 100000))))


def set_outer_shadow(shape, opacity: float, blur_pt: float, offset_pt: float,
                     angle_deg: float = 90, color: str = '000000'):
    """
    Replace a shape's effects with a single outer shadow.

    Args:
        shape: PowerPoint autoshape
        opacity: Shadow opacity 0.0-1.0
        blur_pt: Blur radius in points
        offset_pt: Distance from the shape in points
        angle_deg: Direction of the offset, 90 is straight down
        color: Hex shadow colour
    """
    spPr = shape.element.spPr
    effect_lst = spPr.get_or_add_effectLst()
    for child in list(effect_lst):
        effect_lst.remove(child)

    shadow = etree.SubElement(effect_lst, _qn('outerShdw'))
    shadow.set('blurRad', str(int(round(blur_pt * EMU_PER_POINT))))
    shadow.set('dist', str(int(round(offset_pt * EMU_PER_POINT))))
    shadow.set('dir', str(int(round(angle_deg * ANGLE_UNITS_PER_DEGREE)) % 21600000))
    shadow.set('algn', 'bl')
    shadow.set('rotWithShape', '0')

    clr = etree.SubElement(shadow, _qn('srgbClr'))
    clr.set('val', color)
    alpha = etree.SubElement(clr, _qn('alpha'))
    alpha.set('val', str(int(round(opacity * 100000))))

    logger.debug(f"Outer shadow: blur {blur_pt}pt, offset {offset_pt}pt, opacity {opacity:.2f}")
