"""
Generate a VAPID key pair for Web Push.

Prints the two lines to paste into .env.  The private key is the raw
32-byte scalar, base64url without padding; the public key is the
uncompressed P-256 point the browser subscribes with.

Usage:
    python scripts/generate_vapid_keys.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cryptography.hazmat.primitives.asymmetric import ec

from app.notifications.vapid import decode_private_key, encode_private_key, public_key_b64

if __name__ == "__main__":
    generated = ec.generate_private_key(ec.SECP256R1())
    private_key = encode_private_key(generated)

    # Round-trip through the same decoder the scheduler uses.
    key = decode_private_key(private_key)

    print(f"VAPID_PUBLIC_KEY={public_key_b64(key)}")
    print(f"VAPID_PRIVATE_KEY={private_key}")
