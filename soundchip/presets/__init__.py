"""Ready-made knot sequences, chip specs, tremolo and vibratto presets."""