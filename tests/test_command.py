import dataclasses
import os
import unittest

from forksh.command import Command, Execute, Pipe, Redirect, Sequence


class TestCommand(unittest.TestCase):
    def test_all_nodes_are_commands(self):
        leaf = Execute(("ls",))
        for node in (leaf, Sequence(leaf, leaf), Pipe(leaf, leaf), Redirect.input(leaf, "f")):
            self.assertIsInstance(node, Command)

    def test_execute_defaults_to_no_arguments(self):
        self.assertEqual((), Execute().argv)

    def test_nodes_compare_by_value(self):
        self.assertEqual(
            Pipe(Execute(("a",)), Execute(("b",))),
            Pipe(Execute(("a",)), Execute(("b",))),
        )
        self.assertNotEqual(
            Pipe(Execute(("a",)), Execute(("b",))),
            Sequence(Execute(("a",)), Execute(("b",))),
        )

    def test_nodes_are_immutable(self):
        cmd = Execute(("ls",))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            cmd.argv = ("rm",)

    def test_redirect_input(self):
        cmd = Redirect.input(Execute(("cat",)), "in.txt")
        self.assertEqual(0, cmd.fd)
        self.assertEqual(os.O_RDONLY, cmd.mode)
        self.assertEqual("in.txt", cmd.path)

    def test_redirect_output(self):
        cmd = Redirect.output(Execute(("ls",)), "out.txt")
        self.assertEqual(1, cmd.fd)
        self.assertEqual(os.O_WRONLY | os.O_CREAT, cmd.mode)

    def test_str_renders_command_line(self):
        cmd = Sequence(
            Pipe(Redirect.input(Execute(("sort",)), "in"), Execute(("uniq", "-c"))),
            Redirect.output(Execute(("echo", "done")), "log"),
        )
        self.assertEqual("sort < in | uniq -c ; echo done > log", str(cmd))


if __name__ == "__main__":
    unittest.main()
