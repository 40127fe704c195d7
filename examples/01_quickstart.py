from __future__ import annotations

from _infra import FakeSource, banner, setup_logging

from opresult import OperationResult, OutcomeCode

logger = setup_logging()


def find_lucky(source: FakeSource) -> OperationResult[None]:
    # Plain result: only status and messages.
    result = OperationResult[None]()
    for attempt in range(source.max_attempts):
        num = source.draw()
        if num % source.modulus == 0:
            result.add_info(f"The lucky number is: {num}")
            result.add_info(f"Attempts: {attempt}")
            break

    if not result.messages:
        result.add_error("Didn't find a matching number.")
    return result.log_to(logger.info)


def find_lucky_value(source: FakeSource) -> OperationResult[int]:
    # Typed result: payload starts at 0.
    result = OperationResult.typed(int)
    for attempt in range(source.max_attempts):
        num = source.draw()
        if num % source.modulus == 0:
            result.add_info(f"The lucky number is: {num}").add_info(f"Attempts: {attempt}")
            result.set_return_value(num)
            break
        if attempt == source.max_attempts // 2:
            result.add_warning("Halfway through the attempts.")

    if result.get_last_info() is None:
        result.add_error("Didn't find a matching number.")
    return result.log(logger)


def main() -> None:
    banner("01_quickstart: results, messages, incorporate")

    first = find_lucky(FakeSource(seed=1))
    if first.code is not OutcomeCode.SUCCESS:
        logger.info("Failed to find a match.")
    else:
        logger.info("Found a result!")

    second = find_lucky_value(FakeSource(seed=2))
    # strict truthiness: only SUCCESS is truthy
    if not second:
        logger.info("No clean match (%s).", second.code.value)
    else:
        logger.info("Found a result! Result: %d", second.return_value)

    first.incorporate(second)
    first.log_all_messages(print, "Combined messages:", f"Combined code: {first.code.value}")


if __name__ == "__main__":
    main()
