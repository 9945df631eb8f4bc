"""
Engine components consumed by the optimization loop.

- difference: genotype alignment and difference metrics
- diversity: moment-of-inertia population diversity
- selection: rank distributions, roulette wheel and stochastic universal sampling
- sampling: sample statistics and resampling strategies for noisy evaluation
- weights: cached simplex weight vectors (Hammersley, Latin hypercube)
- config: configuration sections and component factories
"""
