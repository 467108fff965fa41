"""
Unit tests for the Cube class.
"""

import random
import unittest

from cuber.animation import DeferredAnimator
from cuber.colors import WHITE
from cuber.cube import EVERYTHING, PRESERVE_LOGO, Cube
from cuber.directions import FRONT, NAMES
from cuber.solver import HistorySolver, Solver
from cuber.twist import Twist

LETTERS = "XLMRYUEDZFSB"


def run(cube, limit=500):
    """Tick ``cube`` until it has nothing left to do."""
    for _ in range(limit):
        if cube.is_idle:
            return True
        cube.tick()
    return cube.is_idle


class TestCube(unittest.TestCase):
    """Test cases for Cube construction and twisting."""

    def setUp(self):
        self.cube = Cube()
        self.original = list(self.cube.cubelets)

    def assertUnchanged(self, cube=None):
        cube = cube or self.cube
        self.assertEqual([c.id for c in cube.cubelets], list(range(27)))
        self.assertTrue(cube.is_solved())

    def test_type_counts(self):
        """Test the standard layout classifies 1/6/12/8 cubelets."""
        self.assertEqual(len(self.cube.core), 1)
        self.assertEqual(len(self.cube.centers), 6)
        self.assertEqual(len(self.cube.edges), 12)
        self.assertEqual(len(self.cube.corners), 8)
        self.assertEqual(len(self.cube.crosses), 18)
        self.assertEqual(len(self.cube), 27)

    def test_starts_solved(self):
        """Test a new cube is solved and addressed by slot."""
        self.assertTrue(self.cube.is_solved())
        self.assertTrue(self.cube.is_solved(FRONT))
        for address, cubelet in enumerate(self.cube.cubelets):
            self.assertEqual(cubelet.address, address)
        self.assertEqual([s.name for s in self.cube.faces], list(NAMES))

    def test_round_trip(self):
        """Test R then r restores every cubelet by identity."""
        self.assertTrue(self.cube.twist(Twist("R", 90)))
        self.assertFalse(self.cube.is_solved())
        self.assertTrue(self.cube.twist(Twist("r", 90)))
        for before, after in zip(self.original, self.cube.cubelets):
            self.assertIs(before, after)
        self.assertTrue(self.cube.is_solved())

    def test_every_command_inverts(self):
        """Test each command followed by its inverse restores the cube."""
        for letter in LETTERS:
            cube = Cube()
            cube.twist(letter)
            cube.twist(letter.lower())
            self.assertUnchanged(cube)

            cube.twist(letter.lower())
            cube.twist(letter)
            self.assertUnchanged(cube)

    def test_four_quarter_turns(self):
        """Test four quarter turns of any command restore the cube."""
        for command in LETTERS + LETTERS.lower():
            cube = Cube()
            for _ in range(4):
                cube.twist(command)
            self.assertUnchanged(cube)

    def test_whole_cube_turns_stay_solved(self):
        """Test only whole-cube turns keep the solved state."""
        for letter in LETTERS:
            cube = Cube()
            cube.twist(letter)
            self.assertEqual(cube.is_solved(), letter in "XYZ", letter)

    def test_addresses_follow_slots(self):
        """Test addresses resync after a twist."""
        self.cube.twist("U")
        for address, cubelet in enumerate(self.cube.cubelets):
            self.assertEqual(cubelet.address, address)
        self.assertEqual(self.cube.cubelets[0].id, 2)

    def test_whole_cube_turn_moves_faces(self):
        """Test a whole-cube turn brings the down face to the front."""
        self.cube.twist("X")
        self.assertEqual(self.cube.front.face, "front")
        self.assertEqual(self.cube.front.color.name, "red")
        self.assertIs(self.cube.up.color, WHITE)

    def test_sequence_order(self):
        """Test RUru repeated six times is the identity."""
        self.cube.twist_queue.add("RUru" * 6)
        self.assertTrue(run(self.cube))
        self.assertEqual(len(self.cube.twist_queue.history), 24)
        self.assertUnchanged()

    def test_partial_twists(self):
        """Test half turns engage an axis until completed."""
        self.assertTrue(self.cube.twist("R45"))
        self.assertEqual(self.cube.is_engaged("x"), 9)
        self.assertEqual(self.cube.is_tweening(), 0)
        self.assertFalse(self.cube.twist("U"))
        self.assertFalse(self.cube.twist("f"))
        self.assertTrue(self.cube.twist("L"))
        self.assertTrue(self.cube.twist("R"))
        self.assertEqual(self.cube.is_engaged(), 0)

        reference = Cube()
        reference.twist("L")
        reference.twist("R")
        self.assertEqual([c.id for c in self.cube.cubelets], [c.id for c in reference.cubelets])

    def test_whole_cube_turn_refused_over_partial_slice(self):
        """Test a whole-cube turn waits until a partial slice on its axis is finished."""
        self.assertTrue(self.cube.twist("R45"))
        self.assertFalse(self.cube.twist("X"))
        self.assertFalse(self.cube.twist("x"))
        self.assertEqual(self.cube.is_engaged("x"), 9)
        self.assertEqual([c.x for c in self.cube.right], [45] * 9)
        self.assertEqual([c.x for c in self.cube.left], [0] * 9)
        self.assertEqual([c.id for c in self.cube.cubelets], list(range(27)))

        self.assertTrue(self.cube.twist("R"))
        self.assertEqual(self.cube.is_engaged(), 0)
        self.assertTrue(self.cube.twist("X"))

        reference = Cube()
        reference.twist("R")
        reference.twist("X")
        self.assertEqual([c.id for c in self.cube.cubelets], [c.id for c in reference.cubelets])
        self.assertEqual(self.cube.inspect(), reference.inspect())

    def test_partial_twist_reversed(self):
        """Test backing out of a partial twist leaves the cube untouched."""
        self.cube.twist("F30")
        self.cube.twist("f")
        self.assertEqual(self.cube.is_engaged(), 0)
        self.assertUnchanged()

    def test_large_twist(self):
        """Test a 270 degree twist equals one anticlockwise turn."""
        self.cube.twist(Twist("U", 270))
        reference = Cube()
        reference.twist("u")
        self.assertEqual([c.id for c in self.cube.cubelets], [c.id for c in reference.cubelets])
        self.assertEqual(self.cube.inspect(), reference.inspect())

    def test_rejects_while_tweening(self):
        """Test nothing else dispatches while a twist animates."""
        animator = DeferredAnimator(clock=lambda: 0.0)
        cube = Cube(animator=animator)
        self.assertTrue(cube.twist("R"))
        self.assertTrue(cube.is_rotating)
        self.assertEqual(cube.is_tweening(), 9)
        self.assertFalse(cube.twist("U"))
        self.assertFalse(cube.twist("L"))
        self.assertEqual([c.id for c in cube.cubelets], list(range(27)))

        animator.flush()
        self.assertFalse(cube.is_rotating)
        self.assertEqual(cube.cubelets[20].id, 2)

    def test_invalid_twists(self):
        """Test unusable input is refused without raising."""
        self.assertFalse(self.cube.twist("Q"))
        self.assertFalse(self.cube.twist("RU"))
        self.assertUnchanged()

    def test_rejected_twist_leaves_no_history(self):
        """Test a twist refused at dispatch is not recorded."""
        self.cube.twist("R45")
        self.cube.twist_queue.add("U")
        self.cube.tick()
        self.assertEqual(self.cube.twist_queue.future, [])
        self.assertEqual(self.cube.twist_queue.history, [])

    def test_inspect(self):
        """Test the face grids."""
        grids = self.cube.inspect()
        self.assertEqual(list(grids), list(NAMES))
        self.assertEqual(grids["front"], [["W"] * 3] * 3)
        self.assertEqual(grids["back"], [["Y"] * 3] * 3)

    def test_face_labels(self):
        self.assertFalse(self.cube.showing_face_labels)
        self.cube.show_face_labels()
        self.assertTrue(self.cube.showing_face_labels)
        self.cube.hide_face_labels()
        self.assertFalse(self.cube.showing_face_labels)


class TestCubeTick(unittest.TestCase):
    """Test cases for the idle-tick driver."""

    def setUp(self):
        self.cube = Cube(solver=HistorySolver(), rng=random.Random(7))

    def test_shuffle_and_solve(self):
        """Test a shuffled cube unwinds back to solved."""
        twists = self.cube.shuffle(12)
        self.assertEqual(len(twists), 12)
        self.assertTrue(all(t.command in PRESERVE_LOGO for t in twists))
        self.assertTrue(run(self.cube))

        self.cube.solve()
        self.assertTrue(self.cube.is_solving)
        self.assertTrue(run(self.cube))
        self.assertFalse(self.cube.is_solving)
        self.assertEqual([c.id for c in self.cube.cubelets], list(range(27)))
        self.assertTrue(self.cube.is_solved())
        self.assertEqual(self.cube.twist_queue.history, [])

    def test_shuffle_everything(self):
        """Test a shuffle with whole-cube turns still ends solved."""
        cube = Cube(solver=HistorySolver(), shuffle_method=EVERYTHING, rng=random.Random(3))
        twists = cube.shuffle(30)
        self.assertTrue(all(t.command in EVERYTHING for t in twists))
        self.assertTrue(run(cube))
        cube.solve()
        self.assertTrue(run(cube))
        # Solved colors may leave the cube turned as a whole.
        self.assertTrue(cube.is_solved())
        self.assertEqual(cube.is_engaged(), 0)

    def test_continuous_shuffle(self):
        """Test an open-ended shuffle queues a twist per idle tick."""
        self.cube.shuffle()
        self.assertTrue(self.cube.is_shuffling)
        self.cube.tick()
        self.assertEqual(len(self.cube.twist_queue), 1)
        self.cube.tick()
        self.assertEqual(len(self.cube.twist_queue.history), 1)

        self.cube.solve()
        self.assertFalse(self.cube.is_shuffling)

    def test_solve_without_solver(self):
        """Test solve needs a solver."""
        cube = Cube()
        cube.solve()
        self.assertFalse(cube.is_solving)

    def test_solver_contract(self):
        """Test the solver base class is abstract."""
        with self.assertRaises(TypeError):
            Solver()

    def test_tasks_run_when_idle(self):
        """Test scheduled tasks run once nothing else is pending."""
        calls = []
        self.cube.tasks.add(lambda: calls.append("task"))
        self.cube.twist_queue.add("R")
        self.cube.tick()
        self.assertEqual(calls, [])
        self.cube.tick()
        self.assertEqual(calls, ["task"])

    def test_no_tick_while_tweening(self):
        """Test the queue waits for the animator."""
        animator = DeferredAnimator(clock=lambda: 0.0)
        cube = Cube(animator=animator)
        cube.twist_queue.add("RU")
        cube.tick()
        cube.tick()
        self.assertEqual(len(cube.twist_queue), 1)
        animator.flush()
        cube.tick()
        self.assertEqual(len(cube.twist_queue), 0)


if __name__ == '__main__':
    unittest.main()
