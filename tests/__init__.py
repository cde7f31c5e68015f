# (c) Copyright IBM Corp. 2025
