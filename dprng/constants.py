# Width and modulus of the generator's state, counter and hash codomain
SEED_BITS = 28
MODULUS = 0x0FFFFFFF  # 2^28 - 1, not a power of two
MAX_SEED = MODULUS

# Hash rounds
HASH_ROUNDS = 5
HASH_MULTIPLIER = 7

# Bit fields of a 28-bit value: (shift, width); the 4-bit low nibble is not substituted
FIELD_A = (0, 4)
FIELD_B = (4, 8)
FIELD_C = (12, 8)
FIELD_D = (20, 8)

# nextInt: bits taken from a single advance() before a second draw is needed
SINGLE_DRAW_BITS = 20
SINGLE_DRAW_MASK = (1 << SINGLE_DRAW_BITS) - 1
# Widest range covered by two draws (20 + 28 bits)
MAX_RANGE_BITS = SINGLE_DRAW_BITS + SEED_BITS

# next() divides by 2^28 so that 1.0 is never produced
FLOAT_DIVISOR = 1 << SEED_BITS

BYTE_MAX = 0xFF

# Argon2id parameters for passphrase-derived seeds
ARGON_TIME_COST = 2
ARGON_MEMORY_COST_KIB = 16 * 1024  # 16 MiB
ARGON_PARALLELISM = 1
ARGON_HASH_LEN = 16
SALT_SIZE = 16
