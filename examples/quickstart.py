"""
atlaslayout Quick Start Example

This example shows how to describe a sprite sheet as a grid layout and step
through its frames.
"""

from pathlib import Path

from atlaslayout import AtlasLayout
from atlaslayout.preview import save_layout_preview

Path("output").mkdir(exist_ok=True)

# A 4x2 sheet of 24x24 frames with 2px gutters
sheet = AtlasLayout.from_grid((24, 24), columns=4, rows=2, padding=(2, 2))
print(f"Sheet is {sheet.size.x:g}x{sheet.size.y:g} with {len(sheet)} frames")

# Frames 4..7 are the second row: the walk cycle
for frame in range(4, 8):
    rect = sheet.texture_rect(frame)
    print(f"  frame {frame}: {rect.min.x:g},{rect.min.y:g} -> {rect.max.x:g},{rect.max.y:g}"
          f"  uv={sheet.texture_uv(frame)}")

sheet.save("output/hero.json")
save_layout_preview(sheet, "output/hero_overlay.png", scale=4)
print("✅ Saved output/hero.json and output/hero_overlay.png")
