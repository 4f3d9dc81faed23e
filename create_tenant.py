"""
Create a tenant from the command line

Usage:
    python create_tenant.py <subdomain> [display name]
"""
import sys

from dotenv import load_dotenv

load_dotenv()

from app.core.database import SessionLocal, init_db  # noqa: E402
from app.core.exceptions import TenantValidationError  # noqa: E402
from app.services.tenant_service import create_tenant  # noqa: E402


def main(argv) -> int:
    if len(argv) < 2:
        print(__doc__)
        return 2

    subdomain = argv[1]
    name = " ".join(argv[2:]) or None

    init_db()
    db = SessionLocal()
    try:
        tenant = create_tenant(db, subdomain, name)
    except TenantValidationError as e:
        for field, messages in e.errors.items():
            for message in messages:
                print(f"{field} {message}")
        return 1
    finally:
        db.close()

    print(f"Created tenant '{tenant.subdomain}' ({tenant.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
