"""UUID utilities for action-tracker."""

import time
import uuid


def generate_uuid_v7() -> uuid.UUID:
    """
    Generate a UUIDv7 with time-based ordering.

    UUIDv7 keeps primary key inserts roughly ordered, which improves index
    locality compared to random UUIDv4 keys.

    Returns:
        UUIDv7 instance
    """
    # 48 bit millisecond timestamp followed by 80 random bits
    timestamp_ms = int(time.time() * 1000)
    timestamp_bytes = timestamp_ms.to_bytes(6, byteorder='big')
    random_bytes = uuid.uuid4().bytes[6:]
    uuid_bytes = timestamp_bytes + random_bytes

    # Set version to 7 and variant to RFC 4122
    uuid_bytes = uuid_bytes[:6] + bytes([(uuid_bytes[6] & 0x0f) | 0x70]) + uuid_bytes[7:]
    uuid_bytes = uuid_bytes[:8] + bytes([(uuid_bytes[8] & 0x3f) | 0x80]) + uuid_bytes[9:]

    return uuid.UUID(bytes=uuid_bytes)
