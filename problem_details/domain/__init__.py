"""Value objects of the problem details model.

This package holds the status registry, the immutable ``Problem`` and the
builder that produces it, independent from *how* problems are put on the
wire (see ``problem_details.schemas`` and ``problem_details.services``).
"""
