"""Classic 5x7 bitmap font used by the character renderer.

Each glyph is five column bytes; bit 0 of a column is the top pixel row.
The table is stored as hex, eight glyphs per row, starting at code 0.
"""

from __future__ import annotations

GLYPH_WIDTH = 5
GLYPH_COUNT = 256

_FONT_HEX = """
0000000000 3e5b4f5b3e 3e6b4f6b3e 1c3e7c3e1c 183c7e3c18 1c577d571c 1c5e7f5e1c 00183c1800
ffe7c3e7ff 0018241800 ffe7dbe7ff 30483a060e 2629792926 407f050507 407f05253f 5a3ce73c5a
7f3e1c1c08 081c1c3e7f 14227f2214 5f5f005f5f 06097f017f 006689956a 6060606060 94a2ffa294
08047e0408 10207e2010 08082a1c08 081c2a0808 1e10101010 0c1e0c1e0c 30383e3830 060e3e0e06
0000000000 00005f0000 0007000700 147f147f14 242a7f2a12 2313086462 3649562050 0008070300
001c224100 0041221c00 2a1c7f1c2a 08083e0808 0080703000 0808080808 0000606000 2010080402
3e5149453e 00427f4000 7249494946 2141494d33 1814127f10 2745454539 3c4a494931 4121110907
3649494936 464949291e 0000140000 0040340000 0008142241 1414141414 0041221408 0201590906
3e415d594e 7c1211127c 7f49494936 3e41414122 7f4141413e 7f49494941 7f09090901 3e41415173
7f0808087f 00417f4100 2040413f01 7f08142241 7f40404040 7f021c027f 7f0408107f 3e4141413e
7f09090906 3e4151215e 7f09192946 2649494932 03017f0103 3f4040403f 1f2040201f 3f4038403f
6314081463 0304780403 6159494d43 007f414141 0204081020 004141417f 0402010204 4040404040
0003070800 2054547840 7f28444438 3844444428 384444287f 3854545418 00087e0902 18a4a49c78
7f08040478 00447d4000 2040403d00 7f10284400 00417f4000 7c04780478 7c08040478 3844444438
fc18242418 18242418fc 7c08040408 4854545424 04043f4424 3c4040207c 1c2040201c 3c4030403c
4428102844 4c9090907c 4464544c44 0008364100 0000770000 0041360800 0201020402 3c2623263c
1ea1a16112 3a4040207a 3854545559 2155557941 2254547842 2155547840 2054557940 0c1e527212
3955555559 3954545459 3955545458 0000457c41 0002457d42 0001457c40 7d1211127d f0282528f0
7c54554500 2054547c54 7c0a097f49 3249494932 3a4444443a 324a484830 3a4141217a 3a42402078
009da0a07d 3d4242423d 3d4040403d 3c24ff2424 487e494366 2b2ffc2f2b ff0929f620 c0887e0903
2054547941 0000447d41 3048484a32 384040227a 007a0a0a72 7d0d19317d 2629292f28 2629292926
30484d4020 3808080808 0808080838 2f10c8acba 2f102834fa 00007b0000 08142a1422 22142a1408
aa005500aa aa55aa55aa 000000ff00 101010ff00 141414ff00 1010ff00ff 1010f010f0 141414fc00
1414f700ff 0000ff00ff 1414f404fc 141417101f 10101f101f 1414141f00 101010f000 0000001f10
1010101f10 101010f010 000000ff10 1010101010 101010ff10 000000ff14 0000ff00ff 00001f1017
0000fc04f4 1414171017 1414f404f4 0000ff00f7 1414141414 1414f700f7 1414141714 10101f101f
141414f414 1010f010f0 00001f101f 0000001f14 000000fc14 0000f010f0 1010ff10ff 141414ff14
1010101f00 000000f010 ffffffffff f0f0f0f0f0 ffffff0000 000000ffff 0f0f0f0f0f 3844443844
fc4a4a4a34 7e02020606 027e027e02 6355494163 3844443c04 407e201e20 06027e0202 99a5e7a599
1c2a492a1c 4c7201724c 304a4d4d30 3048784830 bc625a463d 3e49494900 7e0101017e 2a2a2a2a2a
44445f4444 40514a4440 40444a5140 0000ff0103 e080ff0000 08086b6b08 3612362436 060f090f06
0000181800 0000101000 3040ff0101 001f01011e 00191d1712 003c3c3c3c 0000000000 0000000000
"""

FONT = bytes.fromhex(_FONT_HEX)


def glyph(code: int) -> bytes:
    """Return the five column bytes of the glyph for character ``code`` (0-255)."""
    if not 0 <= code < GLYPH_COUNT:
        raise ValueError(f"character code out of range: {code}")
    start = code * GLYPH_WIDTH
    return FONT[start:start + GLYPH_WIDTH]