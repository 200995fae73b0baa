from __future__ import annotations

import importlib

from church_roster.config import get_settings_module
from church_roster.container import build_container, seed_demo_data


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    if seed_demo_data(container):
        print(
            "OK: Seeded demo data -> "
            f"{len(container.state.students)} students, {len(container.state.history)} days in {settings.DATA_DIR}"
        )
    else:
        print("Store already has data; nothing seeded.")


if __name__ == "__main__":
    main()
