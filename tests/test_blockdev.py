import pytest

from kerndata.blockdev import BlockDeviceRange, MemoryBlockDevice, read_bytes


def test_range_length_is_end_minus_start():
    assert len(BlockDeviceRange(3, 10)) == 7
    assert len(BlockDeviceRange(5, 5)) == 0


def test_range_equality():
    assert BlockDeviceRange(1, 4) == BlockDeviceRange(1, 4)
    assert BlockDeviceRange(1, 4) != BlockDeviceRange(1, 5)


def test_new_device_reads_zeros():
    device = MemoryBlockDevice(4)
    assert device.block_size == 512
    assert device.block_count == 4
    assert device.read_block(3) == bytes(512)


def test_write_then_read_block():
    device = MemoryBlockDevice(4, block_size=16)
    payload = bytes(range(16))
    device.write_block(2, payload)
    assert device.read_block(2) == payload
    assert device.read_block(1) == bytes(16)


def test_write_wrong_size_rejected():
    device = MemoryBlockDevice(2, block_size=16)
    with pytest.raises(ValueError):
        device.write_block(0, b"short")


@pytest.mark.parametrize("lba", [-1, 4])
def test_block_out_of_range(lba):
    device = MemoryBlockDevice(4, block_size=8)
    with pytest.raises(IndexError):
        device.read_block(lba)
    with pytest.raises(IndexError):
        device.write_block(lba, bytes(8))


def test_initial_data_is_padded():
    device = MemoryBlockDevice(2, block_size=4, data=b"abc")
    assert bytes(device) == b"abc" + bytes(5)


def test_initial_data_too_large():
    with pytest.raises(ValueError):
        MemoryBlockDevice(1, block_size=4, data=b"abcdef")


def test_read_bytes_across_blocks():
    data = bytes(range(32))
    device = MemoryBlockDevice(4, block_size=8, data=data)
    assert read_bytes(device, 5, 14) == data[5:19]
    assert read_bytes(device, 0, 32) == data
    assert read_bytes(device, 7, 0) == b""


def test_read_bytes_past_end():
    device = MemoryBlockDevice(2, block_size=8)
    with pytest.raises(IndexError):
        read_bytes(device, 10, 8)


def test_read_bytes_negative():
    device = MemoryBlockDevice(2, block_size=8)
    with pytest.raises(ValueError):
        read_bytes(device, -1, 2)


def test_generation_can_be_updated():
    device = MemoryBlockDevice(1)
    assert device.generation == 0
    device.generation = 5
    assert device.generation == 5