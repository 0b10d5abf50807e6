from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from _infra import FakeEnv, Settings, banner, run

from monads import Lazy


def main() -> None:
    banner("02_lazy_settings: shared Lazy + map + threads")

    env = FakeEnv({"HOST": "db.internal", "PORT": "5432"})

    settings = Lazy.of(lambda: Settings(host=env.read("HOST"), port=int(env.read("PORT"))))
    dsn = settings.map(lambda s: f"postgres://{s.host}:{s.port}")
    print(f"before: {settings!r}, reads={env.reads}")

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = set(pool.map(lambda _: dsn.get(), range(32)))

    print(f"after: {settings!r}, reads={env.reads}")
    print(f"dsn: {results}")


if __name__ == "__main__":
    run(main)
