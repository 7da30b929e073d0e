"""Interfaces (framework boundary) for FAKEKIT.

Defines the contracts the helpers depend on, chiefly the seam through which
assertion failures reach the host test framework.

Dependency rule: may import `fakekit.location` only. It may be imported by
`fakekit.invocations` and `fakekit.adapters`.
"""
