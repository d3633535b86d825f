from .swagger_to_cs import swagger_to_cs

if __name__ == "__main__":
    swagger_to_cs()
