# levelgen/export/preview.py
from typing import Dict, Tuple
import html
import os
from PIL import Image, ImageColor, ImageDraw

from ..utils.bounds import MAX_JUMP_REACH
from ..utils.level_schema import LevelConfig

# ===== Tunables =====
SCALE      = 0.25      # preview pixels per world pixel
HEADER_H   = 56
SKY_H      = 200       # world pixels drawn above ground
GROUND_H   = 24
MARGIN     = 16
HOUSE_W    = 60
HOUSE_H    = 70

SKY    = (214, 234, 248)
GROUND = (245, 250, 255)
TEXT   = (25, 25, 25)
GREY   = (180, 180, 180)

def _rgb(color: str) -> Tuple[int, int, int]:
    try:
        return ImageColor.getrgb(color)[:3]
    except ValueError:
        return GREY

def summarize_level(level: LevelConfig) -> Dict:
    return {
        "name": level.name,
        "description": level.description,
        "houses": len(level.houses),
        "platforms": len(level.platforms),
        "moving_platforms": sum(1 for p in level.platforms if p.moving),
        "ice_count": level.ice_count,
        "deliveries_needed": level.deliveries_needed,
        "thief_enabled": level.thief_enabled,
    }

def render_preview_png(level: LevelConfig, out_path: str) -> str:
    """Side view: ground strip, houses, platforms at their heights."""
    board_w = int(level.world_width * SCALE)
    board_h = int(SKY_H * SCALE * 2)
    img_w = MARGIN + board_w + MARGIN
    img_h = HEADER_H + board_h + GROUND_H + MARGIN
    img = Image.new("RGB", (img_w, img_h), (250, 250, 250))
    d = ImageDraw.Draw(img)

    gx = MARGIN
    ground_y = HEADER_H + board_h
    d.rectangle([(gx, HEADER_H), (gx + board_w, ground_y)], fill=SKY)
    d.rectangle([(gx, ground_y), (gx + board_w, ground_y + GROUND_H)], fill=GROUND, outline=GREY)

    # jump reach guide
    reach_y = ground_y - int(MAX_JUMP_REACH * SCALE * 2)
    d.line([(gx, reach_y), (gx + board_w, reach_y)], fill=(150, 170, 200), width=1)

    for h in level.houses:
        x0 = gx + int(h.x * SCALE)
        x1 = x0 + int(HOUSE_W * SCALE * 2)
        y0 = ground_y - int(HOUSE_H * SCALE * 2)
        d.rectangle((x0, y0, x1, ground_y), fill=_rgb(h.color), outline=(40, 40, 40))
        d.polygon([(x0 - 3, y0), ((x0 + x1) // 2, y0 - 12), (x1 + 3, y0)], fill=(90, 60, 50))

    for p in level.platforms:
        x0 = gx + int(p.x * SCALE)
        x1 = x0 + max(4, int(p.width * SCALE))
        y1 = ground_y - int(p.height_above_ground * SCALE * 2)
        outline = (200, 40, 40) if p.moving else (40, 40, 40)
        d.rectangle((x0, y1 - 4, x1, y1), fill=(120, 160, 200), outline=outline)

    d.text((MARGIN, 10), level.name, fill=TEXT)
    stats = summarize_level(level)
    d.text((MARGIN, 30),
           f"{stats['houses']} houses  {stats['ice_count']} ice  {stats['deliveries_needed']} deliveries"
           + ("  thief" if level.thief_enabled else ""),
           fill=(80, 80, 80))

    img.save(out_path)
    return out_path

def write_preview_html(level: LevelConfig, outdir: str, png_name: str = "preview.png") -> str:
    css = """
    body{font-family:system-ui,-apple-system,Segoe UI,Roboto,Arial,sans-serif;margin:24px;color:#222}
    .level-stats span{display:inline-block;margin-right:12px}
    img.preview{max-width:100%;height:auto;border-radius:10px;border:1px solid #eee;margin-top:16px}
    """
    stats = summarize_level(level)
    out = ["<html><head><meta charset='utf-8'><title>Level Preview</title>",
           f"<style>{css}</style></head><body>",
           "<div class='level-info'>",
           f"<h3>{html.escape(level.name)}</h3>",
           f"<p>{html.escape(level.description)}</p>",
           "<div class='level-stats'>",
           f"<span>{stats['houses']} Houses</span>",
           f"<span>{stats['ice_count']} Ice Blocks</span>",
           f"<span>{stats['deliveries_needed']} Deliveries</span>"]
    if level.thief_enabled:
        out.append("<span>Thief Active</span>")
    out.append("</div></div>")
    if os.path.isfile(os.path.join(outdir, png_name)):
        out.append(f"<img class='preview' src='{png_name}' alt='Level preview'>")
    out.append("</body></html>")
    path = os.path.join(outdir, "preview.html")
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(out))
    return path
