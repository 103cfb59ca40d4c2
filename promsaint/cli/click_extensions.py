import click

from promsaint.utils.duration import parse_duration

# strconv.ParseBool
GO_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
GO_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}


class Duration(click.ParamType):
    """
    Go style durations (``90s``, ``1h30m``, ``250ns``), converted to nanoseconds.
    """

    name = "duration"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return parse_duration(str(value).strip())
        except ValueError as e:
            self.fail(str(e), param, ctx)


DURATION = Duration()


class GoFlagCommand(click.Command):
    """
    Lets boolean flags take an explicit value the way Go's flag package does,
    e.g. ``-hostalert=true`` or ``-servicealert=false``.
    """

    def parse_args(self, ctx, args):
        flag_opts = set()
        value_opts = set()
        for param in self.get_params(ctx):
            if isinstance(param, click.Option):
                (flag_opts if param.is_flag else value_opts).update(param.opts)

        rewritten = []
        expects_value = False
        for index, arg in enumerate(args):
            if expects_value:
                rewritten.append(arg)
                expects_value = False
                continue
            if arg == "--":
                rewritten.extend(args[index:])
                break

            name, sep, value = arg.partition("=")
            if sep and name in flag_opts:
                if value in GO_TRUE_VALUES:
                    rewritten.append(name)
                elif value not in GO_FALSE_VALUES:
                    raise click.BadOptionUsage(
                        name,
                        f"invalid boolean value {value!r} for {name}",
                        ctx=ctx,
                    )
                continue

            expects_value = arg in value_opts
            rewritten.append(arg)

        return super().parse_args(ctx, rewritten)
