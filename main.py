from rich.pretty import pprint

from maybeargs import *
from maybeargs.utils import Unset

__prog__ = "deploy"

USAGE = "deploy (push -target NAME [-replicas N] [-tags a, b] | status [NAME]) [--dry-run] [--verbose]"


def main(prompt=Unset):
    parser = Parser(prompt, usage=USAGE)

    # global flags may appear anywhere after the program name
    verbose = parser.persistent(flag("verbose", "print the parsed request"))
    dry = parser.persistent(flag("dry-run", "do not touch the cluster"))

    action = parser.expect(
        raw("push", "deploy a new revision"),
        raw("status", "show the current revision"),
        type=RawToken,
    )

    request = {"action": action.value, "dry-run": dry is not None}
    if action.value == "push":
        # a string-kind possibility accepts both '-target api' and a bare 'api'
        match parser.expect(argument("target", "t", ArgumentKind.STRING, "service name")):
            case StringArgument(value=target) | RawToken(value=target):
                request["target"] = target
        replicas = parser.optional(argument("replicas", "r", ArgumentKind.INTEGER, "replica count"))
        request["replicas"] = replicas.value if replicas else 1
        if tags := parser.optional(argument("tags", Unset, ArgumentKind.LIST, "release tags")):
            request["tags"] = list(tags.values)
        else:
            request["tags"] = [tag] if (tag := parser.argument("tags")) is not None else []
    else:
        name = parser.optional(raw(descr="service name"))
        request["target"] = name.value if name else None

    if verbose:
        pprint(request)
    return request


if __name__ == '__main__':
    main()
