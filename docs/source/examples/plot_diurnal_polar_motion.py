"""
Diurnal Polar Motion
====================

Show one day of the Oppolzer terms for each Earth model.

This example demonstrates how the :class:`.OppolzerTerms` class works along with a simple plot.
"""

# %%
# Imports
# -------

# Third Party Imports
import numpy as np
from matplotlib import pyplot as plt

# %%
# Create Coefficient Table
# ------------------------
#
# Build a small coefficient table in code. Each term holds the multipliers of the five
# fundamental arguments and one amplitude per Earth model, in milliarcseconds.
# Real tables are usually loaded from a JSON or XML file with :func:`.loadCoefficientTable`.

# OPPOLZER Imports
from oppolzer.parameters import CoefficientRow, CoefficientTable

terms = [
    ((0, 0, 2, 0, 2), (-6.2, -5.7, -5.1)),
    ((1, 0, 2, 0, 2), (-1.2, -1.1, -1.0)),
    ((0, 0, 2, -2, 2), (-2.9, -2.7, -2.4)),
    ((0, 0, 0, 0, 1), (0.5, 0.45, 0.4)),
]
table = CoefficientTable(
    models=("rigid", "elastic", "liquid core"),
    rows=[CoefficientRow.fromMultipliers(multipliers, amplitudes) for multipliers, amplitudes in terms],
)

# %%
# Instantiate `OppolzerTerms`
# ---------------------------
#
# Create the calculator, starting with the rigid Earth model in native units.

# OPPOLZER Imports
from oppolzer.terms import OppolzerTerms

oppolzer = OppolzerTerms(table, earth_model="rigid", output_unit="mas")

# %%
# Compute Once
# ------------
#
# Calculate the pole offsets at J2000.0, then the north component at a station in Hawaii.

print(oppolzer.compute(51544.5))
print(oppolzer.computeNorthComponent(51544.5, -155.5))

# %%
# Compute One Day
# ---------------
#
# Evaluate every model over one day at ten minute steps.

epochs = np.arange(58453.0, 58454.0, 10.0 / 1440.0)
results = {}
for model in table.models:
    oppolzer.setEarthModel(model)
    results[model] = oppolzer.computeEpochs(epochs)

# %%
# Plot Data
# ---------
#
# The offsets trace a retrograde, nearly circular path once per sidereal day.

fig, (ax_time, ax_path) = plt.subplots(1, 2, figsize=(10, 4))
hours = (epochs - epochs[0]) * 24.0
for model, offsets in results.items():
    ax_time.plot(hours, offsets[:, 0], label=f"X, {model}")
    ax_path.plot(offsets[:, 0], offsets[:, 1], label=model)

ax_time.set_xlabel("Hours since 2018-12-01")
ax_time.set_ylabel("Polar coordinate X (mas)")
ax_time.legend()

ax_path.set_xlabel("X (mas)")
ax_path.set_ylabel("Y (mas)")
ax_path.set_aspect("equal")
ax_path.legend()

plt.tight_layout()
plt.show()
