"""PrimeVue component metadata and design token query service"""
