# -*- coding: utf-8 -*-
"""
Generate icons for the Hole Tools pyRevit buttons
"""
import os
from PIL import Image, ImageDraw, ImageFont

ICON_SIZE = 64
TAB_DIR = os.path.join('HoleTools.extension', u'Отверстия.tab')
ICONS = [
    {
        'button': os.path.join(u'01_Расстановка.panel', u'ОтверстияВСтенах.pushbutton'),
        'bg_color': '#4A90E2',
        'text': 'H',
        'text_color': '#FFFFFF'
    },
    {
        'button': os.path.join(u'99_Обслуживание.panel', u'УдалитьАвтоОтверстия.pushbutton'),
        'bg_color': '#D0021B',
        'text': 'X',
        'text_color': '#FFFFFF'
    },
]


def hex_to_rgb(hex_color):
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def _load_font(size):
    for name in ("arial.ttf", "C:\\Windows\\Fonts\\arial.ttf"):
        try:
            return ImageFont.truetype(name, int(size * 0.4))
        except OSError:
            continue
    return ImageFont.load_default()


def create_icon(bg_color, text, text_color, size=ICON_SIZE):
    """Square icon with centered text"""
    img = Image.new('RGB', (size, size), hex_to_rgb(bg_color))
    draw = ImageDraw.Draw(img)
    font = _load_font(size)

    bbox = draw.textbbox((0, 0), text, font=font)
    text_width = bbox[2] - bbox[0]
    text_height = bbox[3] - bbox[1]
    position = ((size - text_width) // 2, (size - text_height) // 2 - 4)
    draw.text(position, text, fill=hex_to_rgb(text_color), font=font)

    return img


def main(base_path=None):
    base_path = base_path or os.path.dirname(os.path.abspath(__file__))
    tab_path = os.path.join(base_path, TAB_DIR)

    saved = []
    for icon_config in ICONS:
        button_path = os.path.join(tab_path, icon_config['button'])
        os.makedirs(button_path, exist_ok=True)
        icon_path = os.path.join(button_path, 'icon.png')

        print(f"Creating icon for {icon_config['button']}...")
        img = create_icon(
            icon_config['bg_color'],
            icon_config['text'],
            icon_config['text_color']
        )
        img.save(icon_path, 'PNG')
        saved.append(icon_path)
        print(f"  Saved to {icon_path}")

    print("\nAll icons created successfully!")
    return saved


if __name__ == '__main__':
    main()
