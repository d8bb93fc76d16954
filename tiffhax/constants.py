"""Fixed TIFF lookup tables: type widths, type names, tag names, value meanings.

All tables are module-level constants built at import time and never
mutated afterwards, so they can be shared freely between threads.
"""

from typing import Dict

# TIFF type code -> element size in bytes
DATA_TYPE_SIZES: Dict[int, int] = {
    1: 1,    # BYTE
    2: 1,    # ASCII
    3: 2,    # SHORT
    4: 4,    # LONG
    5: 8,    # RATIONAL (num/denom)
    6: 1,    # SBYTE
    7: 1,    # UNDEFINED
    8: 2,    # SSHORT
    9: 4,    # SLONG
    10: 8,   # SRATIONAL
    11: 4,   # FLOAT
    12: 8,   # DOUBLE
    13: 4,   # IFD
    16: 8,   # LONG8 (BigTIFF)
    17: 8,   # SLONG8 (BigTIFF)
    18: 8,   # IFD8 (BigTIFF)
}

DATA_TYPE_NAMES: Dict[int, str] = {
    1: 'BYTE', 2: 'ASCII', 3: 'SHORT', 4: 'LONG', 5: 'RATIONAL',
    6: 'SBYTE', 7: 'UNDEFINED', 8: 'SSHORT', 9: 'SLONG', 10: 'SRATIONAL',
    11: 'FLOAT', 12: 'DOUBLE', 13: 'IFD',
    16: 'LONG8', 17: 'SLONG8', 18: 'IFD8',
}

# Tags whose out-of-line target (or single inline value) points at pixel data
STRIP_OFFSETS_TAG = 273
TILE_OFFSETS_TAG = 324
DATA_FIELD_IDS = frozenset({STRIP_OFFSETS_TAG, TILE_OFFSETS_TAG})

FIELD_NAMES: Dict[int, str] = {
    254: 'NewSubfileType', 255: 'SubfileType',
    256: 'ImageWidth', 257: 'ImageLength', 258: 'BitsPerSample',
    259: 'Compression', 262: 'PhotometricInterpretation',
    263: 'Threshholding', 264: 'CellWidth', 265: 'CellLength',
    266: 'FillOrder', 269: 'DocumentName', 270: 'ImageDescription',
    271: 'Make', 272: 'Model', 273: 'StripOffsets', 274: 'Orientation',
    277: 'SamplesPerPixel', 278: 'RowsPerStrip', 279: 'StripByteCounts',
    280: 'MinSampleValue', 281: 'MaxSampleValue',
    282: 'XResolution', 283: 'YResolution', 284: 'PlanarConfiguration',
    285: 'PageName', 286: 'XPosition', 287: 'YPosition',
    288: 'FreeOffsets', 289: 'FreeByteCounts', 290: 'GrayResponseUnit',
    291: 'GrayResponseCurve', 292: 'T4Options', 293: 'T6Options',
    296: 'ResolutionUnit', 297: 'PageNumber', 301: 'TransferFunction',
    305: 'Software', 306: 'DateTime', 315: 'Artist', 316: 'HostComputer',
    317: 'Predictor', 318: 'WhitePoint', 319: 'PrimaryChromaticities',
    320: 'ColorMap', 321: 'HalftoneHints',
    322: 'TileWidth', 323: 'TileLength', 324: 'TileOffsets',
    325: 'TileByteCounts', 330: 'SubIFDs', 332: 'InkSet',
    338: 'ExtraSamples', 339: 'SampleFormat',
    340: 'SMinSampleValue', 341: 'SMaxSampleValue',
    347: 'JPEGTables', 529: 'YCbCrCoefficients', 530: 'YCbCrSubSampling',
    531: 'YCbCrPositioning', 532: 'ReferenceBlackWhite',
    700: 'XMP', 33432: 'Copyright', 33723: 'IPTC',
    34377: 'Photoshop', 34665: 'ExifIFD', 34675: 'ICCProfile',
    34853: 'GPSIFD',
    36867: 'DateTimeOriginal', 36868: 'DateTimeDigitized',
}

FIELD_VALUE_LOOKUP: Dict[int, Dict[int, str]] = {
    254: {
        0: 'full resolution image',
        1: 'reduced resolution image',
        2: 'single page of a multi-page image',
        4: 'transparency mask',
    },
    259: {
        1: 'no compression',
        2: 'CCITT modified Huffman RLE',
        3: 'CCITT Group 3 fax',
        4: 'CCITT Group 4 fax',
        5: 'LZW',
        6: 'old-style JPEG',
        7: 'JPEG',
        8: 'Adobe deflate',
        32773: 'PackBits',
        33003: 'Aperio JPEG 2000 YCbCr',
        33005: 'Aperio JPEG 2000 RGB',
        34712: 'JPEG 2000',
    },
    262: {
        0: 'white is zero',
        1: 'black is zero',
        2: 'RGB',
        3: 'palette color',
        4: 'transparency mask',
        5: 'CMYK',
        6: 'YCbCr',
        8: 'CIE L*a*b*',
    },
    266: {
        1: 'most significant bit first',
        2: 'least significant bit first',
    },
    274: {
        1: 'top left',
        2: 'top right',
        3: 'bottom right',
        4: 'bottom left',
        5: 'left top',
        6: 'right top',
        7: 'right bottom',
        8: 'left bottom',
    },
    284: {
        1: 'chunky',
        2: 'planar',
    },
    296: {
        1: 'no absolute unit',
        2: 'inch',
        3: 'centimeter',
    },
    317: {
        1: 'no prediction',
        2: 'horizontal differencing',
        3: 'floating point',
    },
    339: {
        1: 'unsigned integer',
        2: 'signed integer',
        3: 'IEEE floating point',
        4: 'undefined',
    },
}
