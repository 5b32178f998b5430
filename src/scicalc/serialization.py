"""
Serialization helpers for scicalc objects (expression trees, values).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Numeric literals are stored as their source digits, not as floats.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from scicalc.decimal_literal import DecimalLiteral
from scicalc.expressions import Atom, Expression, Group
from scicalc.measurement import Measurement
from scicalc.tokens import Token, TokenKind
from scicalc.values import Number, PosNumber, Value


def token_to_dict(token: Token) -> Dict[str, Any]:
    d: Dict[str, Any] = {"kind": token.kind.value}
    if token.literal is not None:
        d["integral"] = token.literal.integral
        d["fractional"] = token.literal.fractional
    return d


def token_from_dict(d: Dict[str, Any]) -> Token:
    kind = TokenKind(d["kind"])
    if kind is TokenKind.NUMBER:
        literal = DecimalLiteral(integral=d["integral"], fractional=d.get("fractional", ""))
        return Token(kind, literal)
    return Token(kind)


def expr_to_dict(expr: Expression) -> Dict[str, Any]:
    if isinstance(expr, Atom):
        return {"type": "atom", "token": token_to_dict(expr.token)}
    if isinstance(expr, Group):
        return {
            "type": "group",
            "operator": token_to_dict(expr.operator),
            "children": [expr_to_dict(child) for child in expr.children],
        }
    raise TypeError(f"Unsupported Expression type: {type(expr)}")


def expr_from_dict(d: Dict[str, Any]) -> Expression:
    t = d.get("type")
    if t == "atom":
        return Atom(token_from_dict(d["token"]))
    if t == "group":
        operator = token_from_dict(d["operator"])
        children = tuple(expr_from_dict(child) for child in d.get("children", []))
        return Group(operator=operator, children=children)
    raise TypeError(f"Unsupported expression dict type: {t}")


def value_to_dict(v: Value) -> Dict[str, Any]:
    if isinstance(v, PosNumber):
        return {"type": "pos_number", "value": v.value}
    if isinstance(v, Number):
        return {"type": "number", "value": v.value}
    if isinstance(v, Measurement):
        return {"type": "measurement", "mean": v.mean, "sigma": v.sigma}
    raise TypeError(f"Unsupported Value type: {type(v)}")


def value_from_dict(d: Dict[str, Any]) -> Value:
    t = d.get("type")
    if t == "pos_number":
        return PosNumber(d["value"])
    if t == "number":
        return Number(d["value"])
    if t == "measurement":
        return Measurement(mean=d["mean"], sigma=d["sigma"])
    raise TypeError(f"Unsupported value dict type: {t}")


def expr_to_json(expr: Expression) -> str:
    return json.dumps(expr_to_dict(expr), sort_keys=True, ensure_ascii=False)


def expr_from_json(s: str) -> Expression:
    d = json.loads(s)
    return expr_from_dict(d)


def expr_to_yaml(expr: Expression) -> str:
    return yaml.safe_dump(expr_to_dict(expr), allow_unicode=True)


def expr_from_yaml(s: str) -> Expression:
    d = yaml.safe_load(s)
    return expr_from_dict(d)
