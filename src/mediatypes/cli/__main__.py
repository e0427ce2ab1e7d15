from mediatypes.cli import mediatypes

if __name__ == "__main__":
    mediatypes()
