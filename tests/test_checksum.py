#!/usr/bin/env python3
"""
校验和算法测试
==============

这个文件测试 polycomp_sign.core.checksum 模块中的异或校验算法。
"""

import pytest
import sys
from functools import reduce
from pathlib import Path

# 添加项目根目录到Python路径，确保能导入我们的模块
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from polycomp_sign.core.checksum import calculate_checksum


class TestCalculateChecksum:
    """测试calculate_checksum函数"""

    def test_calculate_checksum_empty_data(self):
        """空数据的校验和为0"""
        assert calculate_checksum(b'') == 0

    def test_calculate_checksum_single_byte(self):
        """单字节的校验和等于该字节"""
        assert calculate_checksum(b'A') == 65
        assert calculate_checksum(b'\x00') == 0
        assert calculate_checksum(b'\xFF') == 255

    def test_calculate_checksum_multiple_bytes(self):
        """多字节逐个异或"""
        # 0x00 ^ 0x02 ^ 0x00 ^ 0x03 ^ 0x04 = 0x05
        assert calculate_checksum(b'\x00\x02\x00\x03\x04') == 0x05
        assert calculate_checksum(b'ABC') == 65 ^ 66 ^ 67

    def test_calculate_checksum_same_bytes_cancel(self):
        """相同的字节两两抵消"""
        assert calculate_checksum(b'\x5A\x5A') == 0
        assert calculate_checksum(b'XYZXYZ') == 0

    def test_calculate_checksum_stays_in_one_byte(self):
        """大量数据的校验和仍为单字节"""
        result = calculate_checksum(bytes(range(256)) * 40)
        assert 0 <= result <= 0xFF

    def test_calculate_checksum_accepts_bytearray(self):
        """bytearray与bytes结果一致"""
        data = b'HELLO WORLD'
        assert calculate_checksum(bytearray(data)) == calculate_checksum(data)

    @pytest.mark.parametrize("bad_input", ["hello", 123, None, [1, 2, 3]])
    def test_calculate_checksum_invalid_type(self, bad_input):
        """非bytes输入应抛出TypeError"""
        with pytest.raises(TypeError):
            calculate_checksum(bad_input)

    def test_calculate_checksum_matches_reduce(self):
        """与逐字节异或的结果一致"""
        data = bytes([0xCC]) + b"001" + bytes([0xE3, 0xC0, 0x80]) + b"HELLO"
        expected = reduce(lambda a, b: a ^ b, data, 0)
        assert calculate_checksum(data) == expected
