"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""

class ConvertUtils:
    # SI prefixes are powers of 1000, IEC prefixes are powers of 1024
    MULTIPLIERS = {
        "": 1,
        "k": 1000, "kb": 1000,
        "m": 1000 ** 2, "mb": 1000 ** 2,
        "g": 1000 ** 3, "gb": 1000 ** 3,
        "t": 1000 ** 4, "tb": 1000 ** 4,
        "ki": 1024, "kib": 1024,
        "mi": 1024 ** 2, "mib": 1024 ** 2,
        "gi": 1024 ** 3, "gib": 1024 ** 3,
        "ti": 1024 ** 4, "tib": 1024 ** 4,
    }

    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KiB, 3.20MiB).
        """
        if size_bytes < 0:
            return "0B"

        if size_bytes < 1024:
            return f"{size_bytes}B"

        size = float(size_bytes)
        for unit in ["B", "KiB", "MiB", "GiB", "TiB", "PiB"]:
            if size < 1024:
                return f"{size:.2f}{unit}"
            size /= 1024
        return f"{size:.2f}EiB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Convert a file size spec to bytes.
        Supports a plain integer optionally followed by an SI (k, kb, m, mb, ...)
        or IEC (ki, kib, mi, mib, ...) unit, e.g. '100000', '10k', '10KiB'.
        Raises ValueError quoting the input for unknown units or bad numbers.
        """
        text = size_str.strip().lower()

        split_at = next((i for i, c in enumerate(text) if c.isascii() and c.isalpha()), len(text))
        num_str, suffix = text[:split_at], text[split_at:]

        multiplier = ConvertUtils.MULTIPLIERS.get(suffix)
        if multiplier is None:
            raise ValueError(f"Failed to parse file size (bad multiplier -- got {size_str!r})")

        # Only plain unsigned digits are accepted as magnitude
        if not num_str or not (num_str.isascii() and num_str.isdigit()):
            raise ValueError(f"Failed to parse file size (bad number -- got {size_str!r})")

        return int(num_str) * multiplier
