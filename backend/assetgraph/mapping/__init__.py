# Compound-graph mapping stages
