#!/usr/bin/env python3
"""Verify that kernet is correctly installed and functional.

Run against an installed wheel in an isolated environment.
"""

import kernet


def test_version() -> None:
    """Verify version is accessible."""
    print(f"kernet version: {kernet.__version__}")
    assert kernet.__version__, "Version should not be empty"


def test_arithmetic() -> None:
    """Test the arithmetic helpers on a freshly created tensor."""
    ctx = kernet.OperatorContext.default()
    x = kernet.tensor([1.0, 2.0, 3.0], ctx=ctx)
    y = kernet.subtract(1, kernet.multiply(x, 2, ctx=ctx), ctx=ctx)
    assert float(y.sum()) == -9.0, f"Expected -9.0, got {float(y.sum())}"


def test_activations() -> None:
    """Test activation evaluation through the process-wide context."""
    kernet.set_operator_context(kernet.OperatorContext.default())
    out = kernet.evaluate("softmax", kernet.tensor([[1.0, 1.0]]))
    assert out.shape == (1, 2), f"Expected (1, 2), got {out.shape}"
    assert abs(float(out.sum()) - 1.0) < 1e-3


def main() -> None:
    """Run all verification tests."""
    print("Running installation verification tests...")
    print("-" * 40)

    test_version()
    test_arithmetic()
    test_activations()

    print("-" * 40)
    print("All installation tests passed!")


if __name__ == "__main__":
    main()
