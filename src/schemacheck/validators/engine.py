"""
Recursive evaluation of a record against a schema.

``evaluate`` walks the keys of the input and resolves the declared rule for
each one, producing a result tree of the same shape. What a passing or failing
predicate list turns into is decided by the ``success_fn``/``fail_fn`` pair,
so the walk itself carries no result policy.
"""

from functools import partial
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from ..core.shapes import is_mapping, is_sequence
from ..tracing import TraceEvent, TraceLogger, noop_logger
from .base import PredicateTuple, RuleKind, classify_rule, describe, invoke
from .skeleton import build_skeleton

InputNode = Union[Mapping, Callable[[Optional[Any]], Mapping]]


def accept(value: Any) -> bool:
    return True


def reject(messages: List[Any]) -> List[Any]:
    return messages


def run_predicate(
    rule: Any, value: Any, scope: Mapping, key: Any, log: TraceLogger
) -> Any:
    """
    Evaluate one (predicate, message) pair.

    Args:
        rule: The predicate tuple
        value: Value of the property under test
        scope: The enclosing record, for predicates comparing siblings
        key: Property name, used for computed messages and tracing
        log: Trace callback

    Returns:
        True when the predicate holds, otherwise the error message
    """
    tuple_ = PredicateTuple.from_rule(rule, key)
    predicate_name = describe(tuple_.predicate)

    log(
        TraceEvent(
            type="predicate-tuple",
            stage="processing",
            message=f"Invoking tuple predicate for property '{key}'.",
            data={"property": key, "predicate": predicate_name, "value": value},
        )
    )

    if invoke(tuple_.predicate, value, scope):
        verdict = True
    elif isinstance(tuple_.message, str):
        verdict = tuple_.message
    else:
        verdict = invoke(tuple_.message, value, key)

    log(
        TraceEvent(
            type="predicate-tuple",
            stage="processed",
            message=f"Validation result for object property '{key}' is '{verdict}'.",
            data={
                "property": key,
                "predicate": predicate_name,
                "value": value,
                "result": verdict,
            },
        )
    )

    return verdict


def _evaluate_rule(
    success_fn: Callable,
    fail_fn: Callable,
    log: TraceLogger,
    key: Any,
    rule: Any,
    value: Any,
    scope: Mapping,
) -> Any:
    kind = classify_rule(rule, key)

    if kind is RuleKind.PREDICATES:
        verdicts = [run_predicate(item, value, scope, key, log) for item in rule]
        if all(verdict is True for verdict in verdicts):
            return success_fn(value)
        return fail_fn([verdict for verdict in verdicts if verdict is not True])

    if kind is RuleKind.SCHEMA:
        log(
            TraceEvent(
                type="predicate-object",
                stage="processing",
                message=f"Schema predicate object found for property '{key}'.",
                data={"property": key, "predicates": rule},
            )
        )
        # a missing or scalar value still has every nested rule applied to it
        nested_input = value if is_mapping(value) else build_skeleton(rule, {})
        outcome = evaluate(success_fn, fail_fn, log, rule, nested_input)
        log(
            TraceEvent(
                type="predicate-object",
                stage="processed",
                message=f"Validation result for object property '{key}' is '{outcome}'.",
                data={"property": key, "result": outcome},
            )
        )
        return outcome

    if kind is RuleKind.TEMPLATE:
        elements = value if is_sequence(value) else []
        return evaluate(
            success_fn,
            fail_fn,
            log,
            dict(enumerate(rule)),
            dict(enumerate(elements)),
        )

    if kind is RuleKind.DYNAMIC:
        log(
            TraceEvent(
                type="predicate-function",
                stage="processing",
                message=f"Schema predicate function found for property '{key}'.",
                data={"property": key, "predicates": describe(rule)},
            )
        )
        concrete = invoke(rule, value)
        outcome = _evaluate_rule(success_fn, fail_fn, log, key, concrete, value, scope)
        log(
            TraceEvent(
                type="predicate-function",
                stage="processed",
                message=f"Validation result for object property '{key}' is '{outcome}'.",
                data={"property": key, "result": outcome, "rules": concrete},
            )
        )
        return outcome

    log(
        TraceEvent(
            type="predicate-missing",
            stage="processing",
            message=f"No schema predicate found for property '{key}'.",
            data={"property": key},
        )
    )
    outcome = success_fn([])
    log(
        TraceEvent(
            type="predicate-missing",
            stage="processed",
            message=f"Validation result for object property '{key}' is '{outcome}'.",
            data={"property": key, "result": outcome},
        )
    )
    return outcome


def evaluate(
    success_fn: Callable[[Any], Any],
    fail_fn: Callable[[List[Any]], Any],
    logger: Optional[TraceLogger],
    schema_node: Mapping,
    input_node: InputNode,
) -> Dict[Any, Any]:
    """
    Evaluate every key of ``input_node`` against ``schema_node``.

    ``input_node`` may be a record or an accessor returning the record for a
    given key (called with None to list the keys). The accessor form lets
    object rules see the whole assembled record under each rule name.

    Args:
        success_fn: Builds the result of a passing predicate list from the value
        fail_fn: Builds the result of a failing predicate list from its messages
        logger: Trace callback, None for no tracing
        schema_node: Schema mapping property names to rules
        input_node: Record (or record accessor) being validated

    Returns:
        A dict with one result per input key, in input order
    """
    log = logger or noop_logger
    resolve = input_node if callable(input_node) else (lambda key=None: input_node)

    record = resolve(None)
    keys = list(record) if is_mapping(record) else []
    rules = schema_node if is_mapping(schema_node) else {}

    result: Dict[Any, Any] = {}
    for key in keys:
        scope = resolve(key)
        value = scope.get(key)
        rule = rules.get(key)

        log(
            TraceEvent(
                type="property",
                stage="processing",
                message=f"Checking object property '{key}' against schema predicate.",
                data={"key": key, "value": value, "predicates": rule},
            )
        )

        result[key] = _evaluate_rule(success_fn, fail_fn, log, key, rule, value, scope)

    return result


engine = partial(evaluate, accept, reject)
