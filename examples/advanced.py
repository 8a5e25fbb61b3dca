"""
atlaslayout Advanced Example

Plays the part of an atlas builder: places a few differently sized source
textures by hand, attaches the handle mapping, and looks textures up again.
"""

from pathlib import Path

from atlaslayout import AtlasLayout, Handle, Rect

Path("output").mkdir(exist_ok=True)

# Handles as an asset system would hand them out
sword = Handle(3)
shield = Handle(8)
potion = Handle(8, generation=1)  # slot 8 reused after the old texture was freed

layout = AtlasLayout.new_empty((64, 64))
placements = {
    sword: Rect((0, 0), (16, 64)),
    shield: Rect((16, 0), (48, 32)),
    potion: Rect((16, 32), (32, 48)),
}

handles = {}
for handle, rect in placements.items():
    handles[handle] = layout.add_texture(rect)
layout.texture_handles = handles

for name, handle in [("sword", sword), ("shield", shield), ("potion", potion)]:
    index = layout.get_texture_index(handle)
    print(f"{name:>6} {handle!r} -> section {index}: {layout.texture_rect(index)}")

# Unknown handles are simply not found
print("Handle(99) ->", layout.get_texture_index(Handle(99)))

layout.save("output/items.json")
restored = AtlasLayout.load("output/items.json")
assert restored == layout
print("✅ Round-tripped output/items.json")
