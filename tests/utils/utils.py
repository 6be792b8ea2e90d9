TEST_PASSWORD = "test-secret"


def bearer(token: str = TEST_PASSWORD) -> dict:
    return {"Authorization": f"Bearer {token}"}
