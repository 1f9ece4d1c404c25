"""
Convergence criteria for the clustering engine.

The engine stops as soon as a reassignment pass leaves every point where it
was; the pass budget is enforced by the algorithm itself.
"""

from typing import Dict, Any

from ..base.interfaces import ConvergenceCriterion


class ChangeInAssignments(ConvergenceCriterion):
    """Converged once a reassignment pass moves no point."""

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if assignments have stabilized.

        Expects ``n_changed`` in ``current_state``.
        """
        n_changed = current_state['n_changed']

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'n_changed': n_changed
        })

        return n_changed == 0
