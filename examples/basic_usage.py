#!/usr/bin/env python3
"""Basic usage example for binaryutils.

This example demonstrates:
1. Writing a mixed record with BinaryStream
2. Inspecting the byte layout
3. Reading it back in the same order
4. Using the codec functions directly on fixed-width slices
"""

from __future__ import annotations

import uuid

from binaryutils import BinaryStream, print_float, read_lshort, unsigned_varint_size, write_triad


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("binaryutils Basic Usage Example")
    print("=" * 60)
    print()

    # Write a record
    print("1. Writing a record...")
    entity = uuid.uuid4()
    name = "zombie".encode("utf-8")

    stream = BinaryStream()
    stream.put_lshort(0x0F01)
    stream.put_uuid(entity)
    stream.put_unsigned_varint(len(name))
    stream.put(name)
    stream.put_lfloat(12.75)
    stream.put_varint(-3)
    print(f"   Entity: {entity}")
    print(f"   Name length prefix: {unsigned_varint_size(len(name))} byte(s)")
    print()

    # Inspect layout
    print("2. Byte layout...")
    data = stream.get_buffer()
    print(f"   Size: {len(data)} bytes")
    print(f"   Hex: {data.hex()}")
    print(f"   Packet id (first 2 bytes, LE): 0x{read_lshort(data[:2]):04x}")
    print()

    # Read back
    print("3. Reading the record back...")
    reader = BinaryStream(data)
    packet_id = reader.get_lshort()
    decoded_entity = reader.get_uuid()
    decoded_name = reader.get(reader.get_unsigned_varint()).decode("utf-8")
    health = reader.get_lfloat()
    delta = reader.get_varint()
    print(f"   Packet id: 0x{packet_id:04x}")
    print(f"   Entity matches: {decoded_entity == entity}")
    print(f"   Name: {decoded_name}")
    print(f"   Health: {print_float(health)}")
    print(f"   Delta: {delta}")
    print(f"   End of stream: {reader.feof()}")
    print()

    # Direct codec use
    print("4. Codec functions on slices...")
    print(f"   write_triad(16777215) = {write_triad(16777215).hex()}")
    print(f"   write_triad(16777216) = {write_triad(16777216).hex()} (wraps)")
    print()


if __name__ == "__main__":
    main()
