"""Robot mining match against a CPU opponent."""