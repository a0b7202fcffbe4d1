"""Tests for the Decorator demo."""

from pattern_catalog.domain.base.output import DemoOutput
from pattern_catalog.patterns import decorator
from pattern_catalog.patterns.decorator import BaseNotifier, EmailDecorator, SMSDecorator


class TestNotifierDecorators:
    """Test forward-then-append ordering."""

    def test_base_email_sms_stack_produces_three_ordered_lines(self):
        output = DemoOutput()
        notifier = SMSDecorator(EmailDecorator(BaseNotifier(output), output), output)

        notifier.send("hi")

        assert output.lines == ("Notification: hi", "Email sent: hi", "SMS sent: hi")

    def test_stacking_order_determines_effect_order(self):
        output = DemoOutput()
        notifier = EmailDecorator(SMSDecorator(BaseNotifier(output), output), output)

        notifier.send("hi")

        assert output.lines == ("Notification: hi", "SMS sent: hi", "Email sent: hi")

    def test_decorator_owns_wrapped_component(self):
        output = DemoOutput()
        base = BaseNotifier(output)
        assert EmailDecorator(base, output).wrapped is base

    def test_undecorated_base(self):
        output = DemoOutput()
        BaseNotifier(output).send("hi")
        assert output.lines == ("Notification: hi",)


class TestDecoratorDemo:

    def test_run_output(self):
        assert decorator.run() == [
            "Notification: Server is down",
            "Email sent: Server is down",
            "SMS sent: Server is down",
        ]
