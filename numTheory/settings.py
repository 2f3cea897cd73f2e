# numTheory/settings.py
import os

from dotenv import load_dotenv

load_dotenv()

# --- Miller-Rabin rounds ---
# The false-positive probability of one probable-prime answer is at most 4^-rounds.
DEFAULT_ROUNDS = int(os.getenv('NUMTHEORY_MR_ROUNDS', 40))
KEYGEN_ROUNDS = int(os.getenv('NUMTHEORY_KEYGEN_ROUNDS', 100))

# --- Retry caps for randomized searches ---
PRIME_MAX_ATTEMPTS = int(os.getenv('NUMTHEORY_PRIME_MAX_ATTEMPTS', 100000))
EXPONENT_MAX_ATTEMPTS = int(os.getenv('NUMTHEORY_EXPONENT_MAX_ATTEMPTS', 10000))

# --- Pollard's Rho ---
RHO_SEED = int(os.getenv('NUMTHEORY_RHO_SEED', 2))
RHO_MAX_ITERATIONS = int(os.getenv('NUMTHEORY_RHO_MAX_ITERATIONS', 1000000))
RHO_MAX_RESTARTS = int(os.getenv('NUMTHEORY_RHO_MAX_RESTARTS', 20))

# --- Demo entry point ---
DEMO_KEY_BITS = int(os.getenv('NUMTHEORY_DEMO_KEY_BITS', 1024))
LOG_LEVEL = os.getenv('NUMTHEORY_LOG_LEVEL', 'WARNING').upper()
