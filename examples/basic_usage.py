"""
Basic authkeeper usage example.

This example demonstrates the fundamental authkeeper operations:
- Building and validating configuration at startup
- Storing a new access token
- Verifying a presented token
"""

import logging
from types import SimpleNamespace

from authkeeper import Configuration, Encrypted, Sha256Hash


def basic_example():
    """Demonstrate basic authkeeper usage"""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    print("Basic authkeeper Example")
    print("=" * 30)

    # 1. Create configuration; reuse cannot work with hashed tokens
    config = Configuration(
        reuse_access_token=True,
        token_reuse_limit=150,
        token_secret_strategy=Sha256Hash(),
        custom_access_token_attributes=["scopes", "tenant_id"],
    )

    # 2. Validate once, before serving
    warnings = config.validate()
    print(f"✓ Configuration validated with {len(warnings)} correction(s)")
    print(f"  reuse_access_token={config.reuse_access_token}")
    print(f"  custom_access_token_attributes={config.custom_access_token_attributes}")

    # 3. Store a freshly minted token
    access_token = SimpleNamespace(token=None)
    config.token_secret_strategy.store_secret(access_token, "token", "example-token")
    print(f"✓ Token stored: {access_token.token[:20]}...")

    # 4. Verify a presented token
    strategy = config.token_secret_strategy
    print(f"✓ Correct token matches: {strategy.secret_matches('example-token', access_token.token)}")
    print(f"✓ Wrong token matches: {strategy.secret_matches('guess', access_token.token)}")

    # 5. A reversible strategy can give the plaintext back
    encrypted = Encrypted(Encrypted.generate_key())
    application = SimpleNamespace(secret=None)
    encrypted.store_secret(application, "secret", "client-secret")
    print(f"✓ Restored secret: {encrypted.restore_secret(application, 'secret')}")


if __name__ == "__main__":
    basic_example()
