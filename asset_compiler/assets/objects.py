"""
Strategy Board Objects

Sample strategy board object table.

The ids, names and sheet offsets are illustrative placeholders, not the
upstream viewer's object data. Point the [source] config at the real
tables before shipping assets built from it.

StrategyBoardObject names every object type; SPRITE_PARAMETERS holds the
sprite sheet parameters for each type, keyed by the object id as a string:

    image    sprite sheet path (without .webp), empty if the object has no sprite
    offset   horizontal pixel offset of the sprite in the sheet
    scale    default display scale
    size     sprite edge length in pixels, 0 means the full sheet height
    special  object is drawn by the editor itself rather than from a sprite
"""

from enum import IntEnum


class StrategyBoardObject(IntEnum):
    Circle = 1
    Triangle = 2
    Square = 3
    Plus = 4
    Tank = 5
    Healer = 6
    Dps = 7
    Tank1 = 8
    Tank2 = 9
    Healer1 = 10
    Healer2 = 11
    Melee1 = 12
    Melee2 = 13
    Ranged1 = 14
    Ranged2 = 15
    CircleAoe = 16
    ConeAoe = 17
    LineAoe = 18
    DonutAoe = 19
    Stack = 20
    Spread = 21
    Tankbuster = 22
    Proximity = 23
    Gaze = 24
    Knockback = 25
    Waymark1 = 26
    Waymark2 = 27
    Waymark3 = 28
    Waymark4 = 29
    WaymarkA = 30
    WaymarkB = 31
    WaymarkC = 32
    WaymarkD = 33
    Enemy = 34
    Text = 35
    Arrow = 36


def _sprite(image, offset=0, scale=1.0, size=0, special=False):
    return {
        'image': image,
        'offset': offset,
        'scale': scale,
        'size': size,
        'special': special,
    }


SPRITE_PARAMETERS = {
    '1': _sprite('assets/objects/markers', 0, 1.0, 64),
    '2': _sprite('assets/objects/markers', 64, 1.0, 64),
    '3': _sprite('assets/objects/markers', 128, 1.0, 64),
    '4': _sprite('assets/objects/markers', 192, 1.0, 64),
    '5': _sprite('assets/objects/roles', 0, 0.5, 128),
    '6': _sprite('assets/objects/roles', 128, 0.5, 128),
    '7': _sprite('assets/objects/roles', 256, 0.5, 128),
    '8': _sprite('assets/objects/jobs', 0, 0.5, 128),
    '9': _sprite('assets/objects/jobs', 128, 0.5, 128),
    '10': _sprite('assets/objects/jobs', 256, 0.5, 128),
    '11': _sprite('assets/objects/jobs', 384, 0.5, 128),
    '12': _sprite('assets/objects/jobs', 512, 0.5, 128),
    '13': _sprite('assets/objects/jobs', 640, 0.5, 128),
    '14': _sprite('assets/objects/jobs', 768, 0.5, 128),
    '15': _sprite('assets/objects/jobs', 896, 0.5, 128),
    '16': _sprite('assets/objects/circle_aoe', 0, 2.0, 0, True),
    '17': _sprite('assets/objects/cone_aoe', 0, 2.0, 0, True),
    '18': _sprite('assets/objects/line_aoe', 0, 2.0, 0, True),
    '19': _sprite('assets/objects/donut_aoe', 0, 2.0, 0, True),
    '20': _sprite('assets/objects/mechanics', 0, 1.0, 128),
    '21': _sprite('assets/objects/mechanics', 128, 1.0, 128),
    '22': _sprite('assets/objects/mechanics', 256, 1.0, 128),
    '23': _sprite('assets/objects/mechanics', 384, 1.0, 128),
    '24': _sprite('assets/objects/mechanics', 512, 1.0, 128),
    '25': _sprite('assets/objects/mechanics', 640, 1.0, 128),
    '26': _sprite('assets/objects/waymarks', 0, 0.75, 96),
    '27': _sprite('assets/objects/waymarks', 96, 0.75, 96),
    '28': _sprite('assets/objects/waymarks', 192, 0.75, 96),
    '29': _sprite('assets/objects/waymarks', 288, 0.75, 96),
    '30': _sprite('assets/objects/waymarks', 384, 0.75, 96),
    '31': _sprite('assets/objects/waymarks', 480, 0.75, 96),
    '32': _sprite('assets/objects/waymarks', 576, 0.75, 96),
    '33': _sprite('assets/objects/waymarks', 672, 0.75, 96),
    '34': _sprite('assets/objects/enemy', 0, 1.5, 0),
    '35': _sprite('', special=True),
    '36': _sprite('', special=True),
}
