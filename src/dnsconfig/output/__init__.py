"""Output — human (Rich) and machine (JSON) rendering of ServiceResult."""
