from __future__ import annotations

from _infra import LookupFailure, banner, setup_logging

from kungfu import Error, Ok, Result

from opresult import OperationResult, lift as L, merge_results

logger = setup_logging()

PORTS = {"http": 80, "https": 443, "admin": 8443}


def lookup_port(name: str) -> Result[int, LookupFailure]:
    # "Pure" function returning kungfu Result, no OperationResult here.
    port = PORTS.get(name)
    if port is None:
        return Error(LookupFailure(f"unknown service {name!r}"))
    return Ok(port)


def check_port(name: str) -> OperationResult[int]:
    result = L.up.from_result(lookup_port(name))
    if result and result.return_value is not None and result.return_value < 1024:
        result.add_warning(f"{name} uses privileged port {result.return_value}")
    return result


def main() -> None:
    banner("02_kungfu_bridge: kungfu Result <-> OperationResult")

    checks = [check_port(name) for name in ("https", "admin", "gopher")]
    merged = merge_results(checks).log(logger, caller="check_ports")

    match L.down.to_result(checks[1], strict=True):
        case Ok(port):
            print(f"admin port: {port}")
        case Error(messages):
            print(f"admin rejected: {[m.text for m in messages]!r}")

    print(f"overall: {merged.code.value}")


if __name__ == "__main__":
    main()
