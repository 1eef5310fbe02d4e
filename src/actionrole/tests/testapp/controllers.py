"""Controllers of the toy application."""

from __future__ import annotations

from actionrole import Controller, action


class Bar(Controller):
    config = {"action_roles": ["~Kooh"]}

    @action(does="Moo")
    def foo(self, ctx):
        return ctx.get("moo")

    @action(does="~Moo")
    def bar(self, ctx):
        return ctx.get("moo")

    @action(does="+Moo")
    def baz(self, ctx):
        return ctx.get("global_moo")

    @action(does="Logging")
    async def quux(self, ctx):
        return "quux"

    @action
    def plain(self, ctx):
        return ctx.get("kooh")


class Baz(Controller):
    config = {
        "action_roles": ["Moo"],
        "action": {
            "some_action": {"does": ["~Boo"]},
            "another_action": {"does": ["+testapp.action_role.Shout"]},
        },
        "action_args": {
            "some_action": {"boo": "right"},
            "another_action": {"custom_arg": "arg1"},
        },
    }

    @action
    def some_action(self, ctx):
        return ctx.get("action_boo")

    @action(path="/baz/other")
    def another_action(self, ctx):
        return "shout"

    @action(does="Boo")
    def default_boo(self, ctx):
        return ctx.get("action_boo")


class LifecycleController(Controller):
    config = {"namespace": "life", "action_roles": ["Kooh"]}

    @action
    def begin(self, ctx):
        ctx["hooks"] = ["begin"]

    @action
    def auto(self, ctx):
        ctx["hooks"].append("auto")
        return not ctx.get("deny", False)

    @action
    def end(self, ctx):
        ctx["hooks"].append("end")

    @action(does="Moo")
    def index(self, ctx):
        ctx["hooks"].append("index")
        return "index"


class Restricted(Controller):
    config = {"action_args": {"post_only": {"allowed_methods": ["post"]}}}

    @action(does=["RequireMethod", "~Moo"])
    def post_only(self, ctx):
        return "posted"


class FormMixin:
    """Stand-in for a third-party controller base with its own helpers."""

    def form(self):
        return {"fields": []}


class FormLHS(FormMixin, Controller):
    @action(does="Moo")
    def foo(self, ctx):
        if not hasattr(self, "form"):
            raise RuntimeError("form method does not show up")
        return self.form()


class FormRHS(Controller, FormMixin):
    @action(does="Moo")
    def foo(self, ctx):
        if not hasattr(self, "form"):
            raise RuntimeError("form method does not show up")
        return self.form()


class Broken(Controller):
    @action(does="~Missing")
    def nope(self, ctx):
        return None


class BrokenControllerRoles(Controller):
    config = {"action_roles": ["DoesNotExist"]}

    @action
    def nope(self, ctx):
        return None


class BrokenQualified(Controller):
    @action(does="+testapp.action_role.Nowhere")
    def nope(self, ctx):
        return None


ALL = [Bar, Baz, LifecycleController, Restricted, FormLHS, FormRHS]
