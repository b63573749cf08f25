# Salt length bounds. The length is re-encoded as four 2-bit pieces, so it
# must fit in one byte and the salt needs four bytes to carry it.
MIN_SALT_LENGTH = 4
MAX_SALT_LENGTH = 255
LENGTH_BYTES = 4

# Per-byte masks selecting the 2-bit piece of the length stored in salt[i].
LENGTH_MASKS = (0x03, 0x0C, 0x30, 0xC0)

# PRNG seeding: four secure bytes, big-endian, top bit cleared.
SEED_BYTES = 4
SEED_HIGH_MASK = 0x7F
