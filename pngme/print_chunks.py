import struct
import zlib
from typing import List, Optional

from pngme.chunk import Chunk
from pngme.constants import PngSignature
from pngme.errors import InvalidChunkData
from pngme.PNG import Png


# dekoduje chunk pCAL (pixel calibration)
#     <name>\0, X0, X1 (int32), eq_type, n_par, <unit>\0, <param_1>\0...
def describe_pCAL(data: bytes) -> List[str]:
    pos = 0
    cal_name_end = data.find(b'\x00', pos)
    if cal_name_end == -1:
        raise ValueError("pCAL: null terminator missing after calibration name")
    cal_name = data[pos:cal_name_end].decode('latin-1', errors='replace')
    pos = cal_name_end + 1
    x0, x1 = struct.unpack('>ii', data[pos:pos+8])
    pos += 8
    equation_type, num_params = struct.unpack('BB', data[pos:pos+2])
    pos += 2

    unit_end = data.find(b'\x00', pos)
    if unit_end == -1:
        raise ValueError("pCAL: null terminator missing after unit name")
    unit = data[pos:unit_end].decode('latin-1', errors='replace')
    pos = unit_end + 1

    # ostatni parametr nie ma nullbyte, idzie do konca danych
    params = []
    for param_bytes in data[pos:].split(b'\x00')[:num_params]:
        param_str = param_bytes.decode('latin-1', errors='replace')
        #probujemy sparsowac liczbowo, jak sie nie da zostawiamy string
        try:
            params.append(float(param_str))
        except ValueError:
            params.append(param_str)

    lines = [
        f"  Name: {cal_name}",
        f"  X0: {x0}, X1: {x1}",
        f"  Equation type: {equation_type}",
        f"  Number of parameters: {num_params}",
        f"  Unit name: {unit}",
        f"  Parameters: {params}",
    ]

    if equation_type == 0 and len(params) >= 2:
        lines.append(f"  Equation: y = {params[0]} * x + {params[1]}")
    elif equation_type == 1 and len(params) >= 3:
        lines.append(f"  Equation: y = {params[0]} * exp({params[1]} * x) + {params[2]}")
    elif equation_type == 2 and len(params) >= 3:
        lines.append(f"  Equation: y = {params[0]} / ({params[1]} * x) + {params[2]}")
    return lines


def _describe_data(typ: str, d: bytes) -> Optional[List[str]]:
    if typ == 'IHDR':
        w, h, bitd, colort, compm, filterm, interlacem = struct.unpack('>IIBBBBB', d)
        return [f"  width={w}, height={h}, bit_depth={bitd}, color_type={colort}, "
                f"compression={compm}, filter={filterm}, interlace={interlacem}"]

    if typ == 'PLTE':
        # paleta kolorow: lista 3-bajtowych kolorow RGB
        return [f"    Color {i}: R={r} G={g} B={b}"
                for i, (r, g, b) in enumerate(struct.iter_unpack('BBB', d[:len(d) - len(d) % 3]))]

    if typ in ('IDAT', 'IEND'):
        return []

    if typ == 'gAMA':
        gamma, = struct.unpack('>I', d)
        return [f"  gamma={gamma/100000.0}"]

    if typ == 'sBIT':
        return [f"  significant bits per channel = {list(d)}"]

    if typ == 'pCAL':
        return describe_pCAL(d)

    if typ == 'tIME':
        y, mo, day, h, mi, s = struct.unpack('>HBBBBB', d)
        return [f"  {y:04}-{mo:02}-{day:02} {h:02}:{mi:02}:{s:02}"]

    if typ == 'bKGD':
        if len(d) == 6:
            r, g, b = struct.unpack('>HHH', d)
            return [f"  background RGB (16-bit) = ({r}, {g}, {b})"]
        return [f"  bKGD raw data (length={len(d)})"]

    if typ == 'pHYs':
        x_ppu, y_ppu, unit = struct.unpack('>IIB', d)
        unit_descr = 'meter' if unit == 1 else 'unknown'
        return [f"  x_ppu={x_ppu}", f"  y_ppu={y_ppu}", f"  unit={unit} ({unit_descr})"]

    if typ == 'tEXt':
        #niekompresowany tekst: key\0value
        key, val = d.split(b'\x00', 1)
        return [f"  key='{key.decode('latin-1')}', text='{val.decode('latin-1')}'"]

    if typ == 'zTXt':
        #key\0 + metoda kompresji + tekst zlib
        key, rest = d.split(b'\x00', 1)
        text = zlib.decompress(rest[1:]).decode('latin-1')
        return [f"  key='{key.decode('latin-1')}', text='{text}'"]

    return None


def describe_chunk(chunk: Chunk, offset: int) -> List[str]:
    """Header line plus decoded details for one chunk."""
    typ = str(chunk.chunk_type)
    lines = [f"{typ} length: {chunk.length()}, offset: {offset}"]

    try:
        details = _describe_data(typ, chunk.data)
    except (struct.error, ValueError, zlib.error):
        return lines + [f"  [Malformed {typ}] raw data length {chunk.length()}"]

    if details is not None:
        return lines + details

    # wlasne chunki (np. z ukryta wiadomoscia)
    try:
        return lines + [f"  message: {chunk.data_as_text()}"]
    except InvalidChunkData:
        return lines + [f"  Unknown chunk type {typ}, raw data length {chunk.length()}"]


def describe_png(png: Png) -> List[str]:
    lines = []
    offset = len(PngSignature)
    for chunk in png.chunks():
        lines.extend(describe_chunk(chunk, offset))
        offset += chunk.serialized_size()
    if png.tail:
        lines.append(f"Bytes behind IEND: {len(png.tail)}")
    return lines
