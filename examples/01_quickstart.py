from __future__ import annotations

from _infra import ConfigError, FakeEnv, Settings, banner, run

from monads import Try, lift as L


def main() -> None:
    banner("01_quickstart: call + map + recover")

    env = FakeEnv({"HOST": "localhost", "PORT": "80a80"})

    port = (
        L.call(env.read, "PORT")
        .map(int)
        .filter(lambda p: 0 < p < 65536)
        .recover(lambda e: 8080, error_type=ValueError)
    )
    host = L.call(env.read, "HOST").or_else_get(lambda: "0.0.0.0")

    settings = port.map(lambda p: Settings(host=host, port=p))
    print(f"settings: {settings}")

    missing = (
        L.call(env.read, "TOKEN")
        .on_failure(lambda e: print(f"  ! {e}"), error_type=ConfigError)
        .or_else_try(lambda: "anonymous")
    )
    print(f"token: {missing.get()}")

    nested = Try.success(Try.success(L.call(env.read, "HOST")))
    print(f"flattened: {Try.flatten3(nested)}")


if __name__ == "__main__":
    run(main)
